"""
Services layer - Presentation logic on top of the repositories.
"""

from .catalog_report_service import CatalogReportService, ReportSection

__all__ = [
    'CatalogReportService',
    'ReportSection',
]
