"""
Excel test-data fixtures.

A sheet is read as a table: one row holds the headers and every row below it
becomes a dict keyed by those headers::

    | gender | department       |
    | Male   | Computer Science |

    -> [{"gender": "Male", "department": "Computer Science"}]
"""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from .json_reader import FixtureError


def read_excel_fixture(
    file_path: Union[str, Path],
    sheet_name: Optional[str] = None,
    header_row: int = 0,
) -> List[Dict[str, Any]]:
    """
    Load the rows of an Excel sheet as dicts.

    Args:
        file_path: Path to the ``.xlsx`` file
        sheet_name: Sheet to read (the first sheet if None)
        header_row: 0-indexed row holding the headers

    Returns:
        One dict per non-empty row below the header row. Cells missing at the
        end of a short row read as None.

    Raises:
        FixtureError: If the file, the sheet or the header row does not exist,
            or the file is not a workbook
    """
    path = Path(file_path)
    if not path.exists():
        raise FixtureError(f"Fixture file not found: {path}")

    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError) as e:
        raise FixtureError(f"Invalid Excel fixture file {path}: {e}") from e

    try:
        if sheet_name is None:
            sheet = workbook.worksheets[0]
        elif sheet_name in workbook.sheetnames:
            sheet = workbook[sheet_name]
        else:
            raise FixtureError(
                f"Sheet '{sheet_name}' not found in {path}. Sheets: {workbook.sheetnames}"
            )
        table = [list(row) for row in sheet.iter_rows(values_only=True)]
    finally:
        workbook.close()

    if not 0 <= header_row < len(table):
        raise FixtureError(
            f"Header row {header_row} is outside the {len(table)} rows of sheet '{sheet.title}'"
        )

    headers = table[header_row]
    records = []
    for row in table[header_row + 1:]:
        if all(cell is None for cell in row):
            continue
        cells = row + [None] * (len(headers) - len(row))
        records.append(
            {header: cells[index] for index, header in enumerate(headers) if header is not None}
        )

    logger.debug(f"Loaded {len(records)} rows from sheet '{sheet.title}' of: {path}")
    return records
