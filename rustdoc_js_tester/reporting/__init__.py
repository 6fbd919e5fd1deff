"""Reporting module - JSON run reports."""

from .json_reporter import JsonReporter, report_file_name

__all__ = ["JsonReporter", "report_file_name"]
