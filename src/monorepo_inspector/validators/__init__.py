from .report_schema import ReportValidationError, validate_report

__all__ = ["ReportValidationError", "validate_report"]
