"""
Infrastructure layer.

Adapters implementing application protocols against external systems.
"""
