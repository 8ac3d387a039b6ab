"""Application layer services for the progress bounded context."""

from studytrack.application.progress.services.progress_report_service import (
    ProgressDashboard,
    ProgressReportService,
)

__all__ = ["ProgressDashboard", "ProgressReportService"]
