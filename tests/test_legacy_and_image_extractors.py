"""
Tests for the legacy Office rejections and the image validator.
"""
import io

import pytest

from conftest import build_png
from filetext.core.exceptions import LegacyFormatError
from filetext.domain.entities import ExtractOptions
from filetext.services.text_extractors import (
    ImageExtractor,
    LegacyDOCExtractor,
    LegacyPPTExtractor,
    LegacyXLSExtractor,
    get_modern_equivalent,
    is_legacy_office_format,
)
from filetext.services.text_extractors.image_extractor import PLACEHOLDER_TEXT, SAMPLE_TEXT


class TestLegacyOfficeExtractors:

    @pytest.mark.parametrize("extractor_class, legacy, modern", [
        (LegacyDOCExtractor, "DOC", "DOCX"),
        (LegacyXLSExtractor, "XLS", "XLSX"),
        (LegacyPPTExtractor, "PPT", "PPTX"),
    ])
    def test_stream_extraction_always_fails(self, extractor_class, legacy, modern):
        extractor = extractor_class()

        with pytest.raises(LegacyFormatError) as exc_info:
            extractor.extract(io.BytesIO(b"\xd0\xcf\x11\xe0anything"))

        message = str(exc_info.value)
        assert message.startswith(f"legacy {legacy} format is not supported")
        assert f"Please convert to {modern} format" in message
        assert exc_info.value.file_type == legacy.lower()
        assert extractor.supported_types() == [legacy.lower()]

    def test_file_extraction_names_the_file_without_opening_it(self, tmp_path):
        missing = tmp_path / "nowhere" / "report.doc"

        with pytest.raises(LegacyFormatError) as exc_info:
            LegacyDOCExtractor().extract_from_file(str(missing))

        assert "report.doc uses a proprietary binary format" in str(exc_info.value)
        assert str(tmp_path) not in str(exc_info.value)

    def test_is_legacy_office_format(self):
        assert is_legacy_office_format("budget.XLS")
        assert is_legacy_office_format("/tmp/slides.ppt")
        assert not is_legacy_office_format("letter.docx")
        assert not is_legacy_office_format("README")

    def test_get_modern_equivalent(self):
        assert get_modern_equivalent("a.doc") == "DOCX"
        assert get_modern_equivalent("a.xls") == "XLSX"
        assert get_modern_equivalent("a.PPT") == "PPTX"
        assert get_modern_equivalent("a.txt") == "unknown"


class TestImageExtractor:

    def test_valid_image_returns_placeholder_and_dimensions(self):
        content = build_png(4, 3)

        result = ImageExtractor().extract(io.BytesIO(content))

        assert result.text == PLACEHOLDER_TEXT
        assert result.file_type == "image"
        assert result.metadata["image_format"] == "png"
        assert result.metadata["width"] == 4
        assert result.metadata["height"] == 3
        assert result.metadata["file_size"] == len(content)
        assert result.metadata["text_length"] == len(PLACEHOLDER_TEXT)
        assert "extracted_at" in result.metadata
        assert "OCR not implemented" in result.metadata["note"]

    def test_sample_hint_returns_demonstration_text(self):
        result = ImageExtractor().extract(io.BytesIO(build_png()), ExtractOptions(file_type="my_SAMPLE.png"))
        assert result.text == SAMPLE_TEXT

    def test_file_name_is_used_as_hint(self, write_file):
        path = write_file("sample.png", build_png())
        result = ImageExtractor().extract_from_file(path)
        assert result.text == "A picture sample"

    def test_empty_content(self):
        result = ImageExtractor().extract(io.BytesIO(b""))
        assert result.text == ""
        assert result.metadata == {"error": "empty content"}

    def test_undecodable_content(self):
        result = ImageExtractor().extract(io.BytesIO(b"definitely not an image"))
        assert result.text == ""
        assert result.metadata == {"error": "invalid image format"}

    def test_constructor_limit(self):
        result = ImageExtractor(max_file_size=10).extract(io.BytesIO(build_png()))
        assert result.metadata == {"error": "file too large"}

    def test_constructor_limit_from_file(self, write_file):
        path = write_file("photo.png", build_png())
        result = ImageExtractor(max_file_size=10).extract_from_file(path)
        assert result.metadata == {"error": "file too large"}

    def test_call_limit_takes_precedence(self):
        extractor = ImageExtractor(max_file_size=10)
        result = extractor.extract(io.BytesIO(build_png()), ExtractOptions(max_file_size=1_000_000))
        assert result.text == PLACEHOLDER_TEXT

    def test_supported_types(self):
        assert "png" in ImageExtractor().supported_types()
        assert "tiff" in ImageExtractor().supported_types()
