# Local imports
from dsprofile.repositories.report_repository import ReportRepository

__all__ = ["ReportRepository"]
