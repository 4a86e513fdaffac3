"""Report output: console rendering and the JSON artifact."""

from .console import print_header, print_report
from .json_report import report_filename, report_to_dict, write_json_report

__all__ = [
    "print_header",
    "print_report",
    "report_filename",
    "report_to_dict",
    "write_json_report",
]
