"""A minimal single-sheet XLSX writer."""

from __future__ import annotations

import math
import re
import zipfile
from pathlib import Path
from typing import Union
from xml.sax.saxutils import escape

CellValue = Union[str, int, float, bool, None]

MAX_COLUMN = 16384
MAX_ROW = 1048576
_MAX_SHEET_NAME = 31
_INVALID_SHEET_CHARS = frozenset(':\\/?*[]')
_ILLEGAL_XML = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]")
_MAIN_NS = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
_REL_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

_CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="rels" ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '<Override PartName="/xl/workbook.xml" '
    'ContentType="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet.main+xml"/>'
    '<Override PartName="/xl/worksheets/sheet1.xml" '
    'ContentType="application/vnd.openxmlformats-officedocument.spreadsheetml.worksheet+xml"/>'
    '<Override PartName="/xl/styles.xml" '
    'ContentType="application/vnd.openxmlformats-officedocument.spreadsheetml.styles+xml"/>'
    "</Types>"
)

_ROOT_RELS = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    '<Relationship Id="rId1" '
    'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument" '
    'Target="xl/workbook.xml"/>'
    "</Relationships>"
)

_WORKBOOK_RELS = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    '<Relationship Id="rId1" '
    'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/worksheet" '
    'Target="worksheets/sheet1.xml"/>'
    '<Relationship Id="rId2" '
    'Type="http://schemas.openxmlformats.org/officeDocument/2006/relationships/styles" '
    'Target="styles.xml"/>'
    "</Relationships>"
)

_STYLES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    f'<styleSheet xmlns="{_MAIN_NS}">'
    '<fonts count="1"><font><sz val="11"/><name val="Calibri"/></font></fonts>'
    '<fills count="2"><fill><patternFill patternType="none"/></fill>'
    '<fill><patternFill patternType="gray125"/></fill></fills>'
    '<borders count="1"><border><left/><right/><top/><bottom/><diagonal/></border></borders>'
    '<cellStyleXfs count="1"><xf numFmtId="0" fontId="0" fillId="0" borderId="0"/></cellStyleXfs>'
    '<cellXfs count="1"><xf numFmtId="0" fontId="0" fillId="0" borderId="0" xfId="0"/></cellXfs>'
    "</styleSheet>"
)


def column_name(number: int) -> str:
    """Spreadsheet column letters for a 1-based column number."""
    if not 1 <= number <= MAX_COLUMN:
        raise ValueError(f"column number {number} is out of range 1..{MAX_COLUMN}")
    letters = []
    while number:
        number, rest = divmod(number - 1, 26)
        letters.append(chr(ord("A") + rest))
    return "".join(reversed(letters))


def _check_sheet_name(name: str) -> None:
    if not name:
        raise ValueError("sheet name must not be empty")
    if len(name) > _MAX_SHEET_NAME:
        raise ValueError(f"sheet name {name!r} is longer than {_MAX_SHEET_NAME} characters")
    if _INVALID_SHEET_CHARS.intersection(name):
        raise ValueError(f"sheet name {name!r} contains an invalid character")


def _normalize(value: object) -> CellValue:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"cannot store non-finite number {value!r}")
        return value
    return str(value)


def _format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def _cell_xml(ref: str, value: CellValue) -> str:
    if isinstance(value, bool):
        return f'<c r="{ref}" t="b"><v>{int(value)}</v></c>'
    if isinstance(value, (int, float)):
        return f'<c r="{ref}"><v>{_format_number(value)}</v></c>'
    text = escape(_ILLEGAL_XML.sub("", value or ""))
    return f'<c r="{ref}" t="inlineStr"><is><t xml:space="preserve">{text}</t></is></c>'


class Workbook:
    """A workbook with one named sheet, written as an XLSX file."""

    def __init__(self, sheet: str = "main") -> None:
        _check_sheet_name(sheet)
        self.sheet = sheet
        self._rows: dict[int, dict[int, CellValue]] = {}

    def set_cell(self, row: int, column: int, value: object) -> None:
        """Set a cell by 1-based row and column, replacing what was there."""
        if not 1 <= row <= MAX_ROW:
            raise ValueError(f"row number {row} is out of range 1..{MAX_ROW}")
        column_name(column)
        self._rows.setdefault(row, {})[column] = _normalize(value)

    def set_head(self, column: int, value: object) -> None:
        """Set a header cell in the first row."""
        self.set_cell(1, column, value)

    def _sheet_xml(self) -> str:
        rows = []
        for row in sorted(self._rows):
            cells = self._rows[row]
            body = "".join(
                _cell_xml(f"{column_name(col)}{row}", cells[col]) for col in sorted(cells)
            )
            rows.append(f'<row r="{row}">{body}</row>')
        return (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
            f'<worksheet xmlns="{_MAIN_NS}" xmlns:r="{_REL_NS}">'
            f"<sheetData>{''.join(rows)}</sheetData></worksheet>"
        )

    def _workbook_xml(self) -> str:
        name = escape(self.sheet, {'"': "&quot;"})
        return (
            '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
            f'<workbook xmlns="{_MAIN_NS}" xmlns:r="{_REL_NS}">'
            f'<sheets><sheet name="{name}" sheetId="1" r:id="rId1"/></sheets></workbook>'
        )

    def save(self, path: str | Path) -> Path:
        """Write the workbook to path and return it."""
        path = Path(path)
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            archive.writestr("[Content_Types].xml", _CONTENT_TYPES)
            archive.writestr("_rels/.rels", _ROOT_RELS)
            archive.writestr("xl/workbook.xml", self._workbook_xml())
            archive.writestr("xl/_rels/workbook.xml.rels", _WORKBOOK_RELS)
            archive.writestr("xl/styles.xml", _STYLES)
            archive.writestr("xl/worksheets/sheet1.xml", self._sheet_xml())
        return path