"""
Content-based MIME sniffing.

Binary formats are recognised from their leading magic bytes. ZIP containers
are told apart by the names of the entries in the sample, and OLE2 compound
files by the names of their well-known streams. Samples with no known
signature are classified as text/plain when they carry a UTF-16 BOM or
contain no binary control bytes; anything else is unknown.
"""
import codecs
import struct
from typing import List, Optional

from ...core import config
from ...core.exceptions import FileOpenError
from ...core.logging_config import get_logger
from ...domain.value_objects import MimeType

logger = get_logger(__name__)

TEXT_PLAIN = MimeType("text/plain")
ZIP_MIME = MimeType("application/zip")
OLE2_MIME = MimeType("application/x-ole-storage")

ZIP_SIGNATURE = b"PK\x03\x04"
OLE2_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

# (prefix, MIME type), checked in order
MAGIC_SIGNATURES = [
    (b"%PDF", "application/pdf"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"II*\x00", "image/tiff"),
    (b"MM\x00*", "image/tiff"),
    (b"{\\rtf", "application/rtf"),
    (b"\x1f\x8b", "application/gzip"),
    (b"7z\xbc\xaf\x27\x1c", "application/x-7z-compressed"),
    (b"Rar!\x1a\x07", "application/vnd.rar"),
    (b"\x7fELF", "application/x-executable"),
]

# First matching entry prefix decides the OOXML flavour
OOXML_ENTRY_PREFIXES = [
    ("word/", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
    ("xl/", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
    ("ppt/", "application/vnd.openxmlformats-officedocument.presentationml.presentation"),
]

# OLE2 directory entries are UTF-16LE stream names
OLE2_STREAMS = [
    ("WordDocument", "application/msword"),
    ("Workbook", "application/vnd.ms-excel"),
    ("Book", "application/vnd.ms-excel"),
    ("PowerPoint Document", "application/vnd.ms-powerpoint"),
]

# Bytes allowed in text: printable range plus BEL, BS, TAB, LF, FF, CR, ESC
_TEXT_CHARS = bytearray({7, 8, 9, 10, 12, 13, 27} | set(range(0x20, 0x100)) - {0x7f})


def looks_like_text(sample: bytes) -> bool:
    """Heuristic text check over a header sample."""
    if not sample:
        return True
    if sample.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return True
    return not sample.translate(None, _TEXT_CHARS)


def zip_entry_names(sample: bytes) -> List[str]:
    """
    Entry names from the local file headers present in the sample.

    Works on a truncated archive: the central directory is not needed.
    """
    names = []
    offset = sample.find(ZIP_SIGNATURE)
    while offset != -1 and offset + 30 <= len(sample):
        name_length = struct.unpack_from("<H", sample, offset + 26)[0]
        name = sample[offset + 30:offset + 30 + name_length]
        names.append(name.decode("utf-8", errors="replace"))
        offset = sample.find(ZIP_SIGNATURE, offset + 30 + name_length)
    return names


def _sniff_zip(sample: bytes) -> MimeType:
    for name in zip_entry_names(sample):
        for prefix, mime_type in OOXML_ENTRY_PREFIXES:
            if name.startswith(prefix):
                return MimeType(mime_type)
    return ZIP_MIME


def _sniff_ole2(sample: bytes) -> MimeType:
    for stream_name, mime_type in OLE2_STREAMS:
        if stream_name.encode("utf-16-le") + b"\x00\x00" in sample:
            return MimeType(mime_type)
    return OLE2_MIME


def _is_bmp(sample: bytes) -> bool:
    # "BM" alone is too weak for text; the reserved header words must be zero
    return sample[:2] == b"BM" and sample[6:10] == b"\x00\x00\x00\x00"


def sniff_mime_type(sample: bytes) -> Optional[MimeType]:
    """
    Classify a header sample.

    Returns:
        MIME type string, or None when the sample cannot be classified
    """
    if not sample:
        return TEXT_PLAIN
    if sample.startswith(ZIP_SIGNATURE):
        return _sniff_zip(sample)
    if sample.startswith(OLE2_SIGNATURE):
        return _sniff_ole2(sample)
    for signature, mime_type in MAGIC_SIGNATURES:
        if sample.startswith(signature):
            return MimeType(mime_type)
    if _is_bmp(sample):
        return MimeType("image/bmp")
    if looks_like_text(sample):
        return TEXT_PLAIN
    return None


def detect_mime_type(file_path: str) -> Optional[MimeType]:
    """
    Sniff the MIME type of a file from its leading bytes.

    Raises:
        FileOpenError: If the file cannot be read (distinct from an unknown type)
    """
    try:
        with open(file_path, "rb") as f:
            sample = f.read(config.SNIFF_BYTES)
    except OSError as e:
        raise FileOpenError("failed to detect file type", "", "detect", e) from e

    mime_type = sniff_mime_type(sample)
    logger.debug(f"Detected MIME type for {file_path}: {mime_type or 'unknown'}")
    return mime_type
