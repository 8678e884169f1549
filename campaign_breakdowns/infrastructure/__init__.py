"""Infrastructure layer package."""

from .json_repository import load_campaign_records, parse_campaign_records
from .report_exporter import save_output_workbook, save_summary_json, write_output_excel

__all__ = [
    "load_campaign_records",
    "parse_campaign_records",
    "save_output_workbook",
    "save_summary_json",
    "write_output_excel",
]
