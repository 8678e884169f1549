"""Infrastructure adapter for summary export targets."""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict

import polars as pl


logger = logging.getLogger(__name__)

EXCEL_SHEET_NAME_LIMIT = 31


def _import_openpyxl() -> Any:
    try:
        from openpyxl import Workbook
    except Exception as exc:  # pragma: no cover
        raise RuntimeError("openpyxl is required for Excel fallback output.") from exc
    return Workbook


def _excel_cell_value(value: Any) -> Any:
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False)
    return value


def _write_with_polars(path: Path, sheets: Dict[str, pl.DataFrame]) -> bool:
    try:
        from xlsxwriter import Workbook

        with Workbook(str(path)) as workbook:
            for sheet_name, frame in sheets.items():
                frame.write_excel(workbook=workbook, worksheet=str(sheet_name)[:EXCEL_SHEET_NAME_LIMIT])
        return True
    except PermissionError:
        raise
    except Exception as exc:
        logger.warning("Polars Excel writer failed (%s); falling back to openpyxl", exc)
        return False


def _write_with_openpyxl(path: Path, sheets: Dict[str, pl.DataFrame]) -> None:
    Workbook = _import_openpyxl()
    workbook = Workbook()
    workbook.remove(workbook.active)

    for sheet_name, frame in sheets.items():
        worksheet = workbook.create_sheet(title=str(sheet_name)[:EXCEL_SHEET_NAME_LIMIT])
        worksheet.append(frame.columns)
        for row in frame.iter_rows(named=False):
            worksheet.append([_excel_cell_value(value) for value in row])

    workbook.save(path)


def write_output_excel(path: str | Path, sheets: Dict[str, pl.DataFrame]) -> None:
    """Write one worksheet per frame, Polars/xlsxwriter first with openpyxl fallback."""
    if not sheets:
        raise ValueError("No sheets to write")
    excel_path = Path(path)
    excel_path.parent.mkdir(parents=True, exist_ok=True)

    if _write_with_polars(excel_path, sheets):
        return
    _write_with_openpyxl(excel_path, sheets)


def save_summary_json(path: Path, summary: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(summary, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Saved summary JSON to %s", path)


def save_output_workbook(path: Path, sheets: Dict[str, pl.DataFrame]) -> tuple[bool, str]:
    try:
        write_output_excel(path, sheets)
    except PermissionError as exc:
        logger.warning("Excel save skipped for %s: %s", path, exc)
        return False, str(exc)
    logger.info("Saved workbook with %d sheets to %s", len(sheets), path)
    return True, ""
