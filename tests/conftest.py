"""
Shared fixtures: in-memory builders for the container formats under test.
"""
import io
import logging
import zipfile

import pytest
from PIL import Image

WORD_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
DRAWING_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
PRESENTATION_NS = "http://schemas.openxmlformats.org/presentationml/2006/main"

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types"></Types>'
)


def build_zip(parts: dict) -> bytes:
    """Write parts in insertion order; the first entry decides how the archive is sniffed."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as archive:
        for name, data in parts.items():
            archive.writestr(name, data)
    return buf.getvalue()


def docx_document_xml(body: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
        f'<w:document xmlns:w="{WORD_NS}"><w:body>{body}</w:body></w:document>'
    )


def build_docx(paragraphs) -> bytes:
    body = "".join(f"<w:p><w:r><w:t>{text}</w:t></w:r></w:p>" for text in paragraphs)
    return build_zip({
        "word/document.xml": docx_document_xml(body),
        "[Content_Types].xml": CONTENT_TYPES,
    })


def slide_xml(*runs) -> str:
    shapes = "".join(f"<a:p><a:r><a:t>{run}</a:t></a:r></a:p>" for run in runs)
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>\n'
        f'<p:sld xmlns:a="{DRAWING_NS}" xmlns:p="{PRESENTATION_NS}"><p:cSld><p:spTree>'
        f"<p:sp><p:txBody>{shapes}</p:txBody></p:sp>"
        "</p:spTree></p:cSld></p:sld>"
    )


def build_pptx(slides) -> bytes:
    parts = {
        f"ppt/slides/slide{number}.xml": slide_xml(*runs)
        for number, runs in enumerate(slides, start=1)
    }
    parts["[Content_Types].xml"] = CONTENT_TYPES
    return build_zip(parts)


def build_pdf(text: str = "Hello World") -> bytes:
    """A one-page PDF using the standard Helvetica font, with a correct xref table."""
    stream = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_offset)
    return bytes(out)


def build_png(width: int = 4, height: int = 3) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color=(255, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()


BINARY_BLOB = b"\x00\x01\x02\x03\x04binary\x00\x05\x06"


@pytest.fixture(autouse=True)
def restore_root_logging():
    """setup_logging() replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_file(tmp_path):
    """Write bytes to a file under tmp_path and return its path as a string."""
    def _write(name: str, content: bytes) -> str:
        path = tmp_path / name
        path.write_bytes(content)
        return str(path)
    return _write


class StoppedClock:
    """Monotonic clock that only moves when a test advances it."""

    def __init__(self):
        self.now = 1000.0

    def monotonic(self):
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def stopped_clock(monkeypatch):
    """Drive Deadline from a clock the test controls."""
    from filetext.utils import deadline as deadline_module

    clock = StoppedClock()
    monkeypatch.setattr(deadline_module, "time", clock)
    return clock
