"""
Tests for content sniffing and extractor selection.
"""
import codecs
import io

import openpyxl
import pytest
from PIL import Image

from conftest import BINARY_BLOB, build_docx, build_pdf, build_png, build_pptx, build_zip
from filetext.core.exceptions import FileOpenError, UnknownFileTypeError, UnsupportedMimeTypeError
from filetext.services.text_extractors import (
    CSVExtractor,
    DOCXExtractor,
    ExtractorFactory,
    ImageExtractor,
    LegacyDOCExtractor,
    LegacyPPTExtractor,
    LegacyXLSExtractor,
    MarkdownExtractor,
    PDFExtractor,
    PlainTextExtractor,
    PPTXExtractor,
    XLSXExtractor,
    detect_mime_type,
    sniff_mime_type,
)
from filetext.services.text_extractors.detection import OLE2_SIGNATURE, looks_like_text, zip_entry_names


class TestSniffing:

    def test_empty_sample_is_text(self):
        assert sniff_mime_type(b"") == "text/plain"

    def test_text_sample(self):
        assert sniff_mime_type(b"name,age\r\nbob,42\tok\x1b[0m\x0c") == "text/plain"

    def test_binary_signatures(self):
        assert sniff_mime_type(build_pdf()) == "application/pdf"
        assert sniff_mime_type(build_png()) == "image/png"

    def test_ooxml_containers(self):
        assert sniff_mime_type(build_docx(["x"])) == (
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
        )
        assert sniff_mime_type(build_pptx([["x"]])) == (
            "application/vnd.openxmlformats-officedocument.presentationml.presentation"
        )

    def test_plain_zip(self):
        assert sniff_mime_type(build_zip({"readme.txt": "hi"})) == "application/zip"

    def test_xlsx_container(self):
        workbook = openpyxl.Workbook()
        workbook.active["A1"] = "x"
        buf = io.BytesIO()
        workbook.save(buf)

        assert sniff_mime_type(buf.getvalue()) == (
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )

    def test_zip_entry_names_in_order(self):
        archive = build_zip({"a.txt": "1", "dir/b.txt": "2"})
        assert zip_entry_names(archive) == ["a.txt", "dir/b.txt"]
        assert zip_entry_names(archive[:20]) == []

    def test_ole2_streams(self):
        header = OLE2_SIGNATURE + b"\x00" * 504
        word = header + "WordDocument".encode("utf-16-le") + b"\x00\x00"
        excel = header + "Workbook".encode("utf-16-le") + b"\x00\x00"

        assert sniff_mime_type(word) == "application/msword"
        assert sniff_mime_type(excel) == "application/vnd.ms-excel"
        assert sniff_mime_type(header) == "application/x-ole-storage"

    def test_bmp(self):
        buf = io.BytesIO()
        Image.new("RGB", (2, 2)).save(buf, format="BMP")
        assert sniff_mime_type(buf.getvalue()) == "image/bmp"

    def test_text_starting_with_bm_is_not_bmp(self):
        assert sniff_mime_type(b"BM is a plain note") == "text/plain"

    def test_unclassifiable_binary(self):
        assert sniff_mime_type(BINARY_BLOB) is None

    def test_looks_like_text(self):
        assert looks_like_text(b"")
        assert looks_like_text(codecs.BOM_UTF16_LE + "hi".encode("utf-16-le"))
        assert looks_like_text("café".encode("latin-1"))
        assert not looks_like_text(b"abc\x00def")
        assert not looks_like_text(b"abc\x7f")

    def test_detect_mime_type_reads_the_file(self, write_file):
        assert detect_mime_type(write_file("doc.bin", build_pdf())) == "application/pdf"

    def test_detect_mime_type_missing_file(self, tmp_path):
        with pytest.raises(FileOpenError) as exc_info:
            detect_mime_type(str(tmp_path / "missing"))

        assert exc_info.value.message == "failed to detect file type"
        assert exc_info.value.operation == "detect"


class TestExtractorFactory:

    @pytest.mark.parametrize("mime_type, expected", [
        ("application/pdf", PDFExtractor),
        ("application/vnd.openxmlformats-officedocument.wordprocessingml.document", DOCXExtractor),
        ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", XLSXExtractor),
        ("application/vnd.openxmlformats-officedocument.presentationml.presentation", PPTXExtractor),
        ("application/msword", LegacyDOCExtractor),
        ("application/vnd.ms-excel", LegacyXLSExtractor),
        ("application/vnd.ms-powerpoint", LegacyPPTExtractor),
        ("image/jpeg", ImageExtractor),
        ("text/plain", PlainTextExtractor),
        ("text/csv", PlainTextExtractor),
        ("text/markdown", PlainTextExtractor),
    ])
    def test_mime_table(self, mime_type, expected):
        assert isinstance(ExtractorFactory.create_extractor_for_mime(mime_type, "x"), expected)

    def test_unsupported_mime_type(self):
        with pytest.raises(UnsupportedMimeTypeError) as exc_info:
            ExtractorFactory.create_extractor_for_mime("application/zip", "bundle.zip")

        assert str(exc_info.value) == "unsupported file type application/zip for bundle.zip"
        assert exc_info.value.mime_type == "application/zip"

    def test_from_path_sniffs_content_not_extension(self, write_file):
        path = write_file("misnamed.txt", build_docx(["x"]))
        assert isinstance(ExtractorFactory.create_extractor_from_path(path), DOCXExtractor)

    def test_from_path_unknown_content(self, write_file):
        path = write_file("blob.bin", BINARY_BLOB)

        with pytest.raises(UnknownFileTypeError) as exc_info:
            ExtractorFactory.create_extractor_from_path(path)

        assert str(exc_info.value) == f"unknown file type for: {path}"

    def test_from_path_missing_file(self, tmp_path):
        with pytest.raises(FileOpenError):
            ExtractorFactory.create_extractor_from_path(str(tmp_path / "missing.pdf"))

    def test_extension_lookup(self):
        assert isinstance(ExtractorFactory.get_extractor_by_extension(".CSV"), CSVExtractor)
        assert isinstance(ExtractorFactory.get_extractor_by_extension("markdown"), MarkdownExtractor)
        assert isinstance(ExtractorFactory.get_extractor_by_extension("jpg"), ImageExtractor)
        assert ExtractorFactory.get_extractor_by_extension("exe") is None

    def test_fresh_instance_per_call(self):
        first = ExtractorFactory.get_extractor_by_extension("pdf")
        second = ExtractorFactory.get_extractor_by_extension("pdf")
        assert first is not second

    def test_supported_listings(self):
        extensions = ExtractorFactory.get_supported_extensions()
        assert extensions == sorted(extensions)
        assert {"txt", "csv", "md", "docx", "pptx", "xlsx", "pdf", "doc", "png"} <= set(extensions)
        assert "text/*" in ExtractorFactory.get_supported_mime_types()

        formats = ExtractorFactory.get_supported_formats()
        assert formats["Markdown"] == ["md", "markdown"]
        assert formats["DOC"] == ["doc"]
