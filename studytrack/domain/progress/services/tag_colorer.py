"""Color variant assignment for plan tags in progress reports."""

from collections.abc import Callable, Sequence
from typing import Final

PROGRESS_TAG_VARIANTS: Final[tuple[str, ...]] = (
    "indigo",
    "stone",
    "teal",
    "violet",
    "amber",
    "slate",
)

# Maps a plan's position in the plan list to a color variant
TagColorer = Callable[[int], str]


def cyclic_colorer(palette: Sequence[str] = PROGRESS_TAG_VARIANTS) -> TagColorer:
    """
    Colorer cycling through palette by plan position.

    The assignment is recomputed for every report, so it is stable only as
    long as plan ordering is.
    """
    if not palette:
        raise ValueError("Palette must contain at least one variant")
    variants = tuple(palette)

    def colorer(index: int) -> str:
        return variants[index % len(variants)]

    return colorer


default_colorer: Final[TagColorer] = cyclic_colorer()
