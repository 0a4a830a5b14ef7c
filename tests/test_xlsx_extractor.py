"""
Tests for XLSX extraction through openpyxl.
"""
import io

import pytest
from openpyxl import Workbook

from filetext.core.exceptions import ExtractionTimeoutError, FileSizeLimitError, ParserError
from filetext.domain.entities import ExtractOptions
from filetext.services.text_extractors import XLSXExtractor, xlsx_extractor
from filetext.services.text_extractors.xlsx_extractor import cell_string


def workbook_bytes(*sheets) -> bytes:
    workbook = Workbook()
    workbook.remove(workbook.active)
    for index, rows in enumerate(sheets, start=1):
        sheet = workbook.create_sheet(f"Sheet{index}")
        for row in rows:
            sheet.append(row)
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


def test_cells_are_concatenated_without_separators():
    content = workbook_bytes(
        [["Name", "Age"], ["Alice", 30]],
        [["x"]],
    )

    result = XLSXExtractor().extract(io.BytesIO(content))

    assert result.text == "NameAgeAlice30x"
    assert result.file_type == "xlsx"
    assert result.metadata["sheets"] == 2
    assert result.metadata["rows"] == 3
    assert result.metadata["cells"] == 5
    assert result.metadata["character_count"] == 15
    assert result.metadata["line_count"] == 1
    assert result.metadata["size_bytes"] == len(content)
    assert "char_count" not in result.metadata


def test_empty_cells_contribute_nothing_but_are_counted():
    content = workbook_bytes([["a", None, "  b  "]])

    result = XLSXExtractor().extract(io.BytesIO(content))

    assert result.text == "ab"
    assert result.metadata["cells"] == 3


def test_not_a_workbook():
    with pytest.raises(ParserError) as exc_info:
        XLSXExtractor().extract(io.BytesIO(b"just some text"))

    assert exc_info.value.message == "failed to parse XLSX file"
    assert exc_info.value.file_type == "xlsx"


def test_size_limit():
    content = workbook_bytes([["a"]])
    with pytest.raises(FileSizeLimitError):
        XLSXExtractor().extract(io.BytesIO(content), ExtractOptions(max_file_size=10))


def test_cell_string():
    assert cell_string(None) == ""
    assert cell_string(2.5) == "2.5"
    assert cell_string("text") == "text"


def test_timeout_between_rows(stopped_clock, monkeypatch):
    def slow_cell_string(value):
        stopped_clock.advance(10)
        return cell_string(value)

    monkeypatch.setattr(xlsx_extractor, "cell_string", slow_cell_string)
    content = workbook_bytes([["a"], ["b"]])

    with pytest.raises(ExtractionTimeoutError) as exc_info:
        XLSXExtractor().extract(io.BytesIO(content), ExtractOptions(timeout=5))

    assert exc_info.value.operation == "timeout"
    assert "during row" in str(exc_info.value)
