"""
Encoding normalization for byte-oriented text.

Converts arbitrary bytes to text using a fixed fallback chain:
valid UTF-8 first, then an ordered list of legacy encodings, then lossy
replacement. The order is a plain tie-break (Unicode transports before single
byte code pages, Western before Cyrillic); no frequency analysis is done.

The UTF-16 candidates decode strictly: odd-length input or a lone surrogate
rejects the candidate instead of substituting U+FFFD, so such input moves on
to the next encoding in the chain.
"""
import codecs
from typing import List, Tuple

UTF8_LABEL = "UTF-8"
REPLACEMENT_LABEL = "UTF-8 (with replacements)"


def _decode_utf16(content: bytes, default_codec: str) -> str:
    """Decode UTF-16 honouring a BOM when present, else the given byte order."""
    if content.startswith(codecs.BOM_UTF16_LE):
        return content[len(codecs.BOM_UTF16_LE):].decode("utf-16-le")
    if content.startswith(codecs.BOM_UTF16_BE):
        return content[len(codecs.BOM_UTF16_BE):].decode("utf-16-be")
    return content.decode(default_codec)


def _decode_utf16_le(content: bytes) -> str:
    return _decode_utf16(content, "utf-16-le")


def _decode_utf16_be(content: bytes) -> str:
    return _decode_utf16(content, "utf-16-be")


# (label, decoder) tried in order after UTF-8 fails
CANDIDATE_ENCODINGS: List[Tuple[str, object]] = [
    ("UTF-16LE", _decode_utf16_le),
    ("UTF-16BE", _decode_utf16_be),
    ("Windows-1252", lambda content: content.decode("cp1252")),
    ("ISO-8859-1", lambda content: content.decode("iso-8859-1")),
    ("Windows-1251", lambda content: content.decode("cp1251")),
]


def _is_valid_utf8(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def normalize_encoding(content: bytes) -> Tuple[str, str]:
    """
    Convert raw bytes to text.

    Args:
        content: Raw bytes of unknown encoding

    Returns:
        Tuple of (text, encoding label). Never raises: the replacement
        decode is the terminal branch.
    """
    try:
        return content.decode("utf-8"), UTF8_LABEL
    except UnicodeDecodeError:
        pass

    for label, decoder in CANDIDATE_ENCODINGS:
        try:
            text = decoder(content)
        except UnicodeDecodeError:
            continue
        if _is_valid_utf8(text):
            return text, label

    return content.decode("utf-8", errors="replace"), REPLACEMENT_LABEL


def normalize_line_endings(text: str) -> str:
    """Convert Windows (\\r\\n) and old Mac (\\r) line endings to \\n."""
    text = text.replace("\r\n", "\n")
    return text.replace("\r", "\n")
