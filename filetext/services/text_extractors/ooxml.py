"""
Office Open XML text recovery.

DOCX and PPTX files are ZIP containers holding XML parts with text runs.
Text is recovered with a two-stage pattern scan (outer structural element,
inner run element) instead of an XML parser.

Shapes that are NOT supported, kept as-is for compatibility:
- a paragraph spanning several lines of XML (the scan does not cross newlines)
- self-closing or nested run elements
- attributes containing '>' inside a paragraph or run tag
- XML entities (&amp;, &lt;, ...) are returned undecoded
"""
import io
import re
import zipfile
from typing import List

from ...core.exceptions import InvalidContainerError, MissingPartError

DOCX_DOCUMENT_PART = "word/document.xml"

DOCX_PARAGRAPH_RE = re.compile(r"<w:p[^>]*>(.*?)</w:p>")
DOCX_RUN_RE = re.compile(r"<w:t[^>]*>([^<]*)</w:t>")

PPTX_SLIDE_PART_RE = re.compile(r"^ppt/slides/slide\d+\.xml$")
PPTX_RUN_RE = re.compile(r"<a:t[^>]*>([^<]*)</a:t>")


def open_package(content: bytes, file_type: str) -> zipfile.ZipFile:
    """
    Open a byte buffer as a ZIP container.

    Raises:
        InvalidContainerError: If content is not a valid ZIP archive
    """
    try:
        return zipfile.ZipFile(io.BytesIO(content))
    except zipfile.BadZipFile as e:
        raise InvalidContainerError(
            f"failed to read {file_type.upper()} as zip", file_type, "open_container", e
        ) from e


def read_part(package: zipfile.ZipFile, name: str, file_type: str) -> str:
    """
    Read one XML part as text.

    Raises:
        MissingPartError: If the part is absent
        InvalidContainerError: If the part cannot be decompressed
    """
    try:
        data = package.read(name)
    except KeyError as e:
        raise MissingPartError(
            f"{name.rsplit('/', 1)[-1]} not found in {file_type.upper()} file", file_type, "find_part", e
        ) from e
    except (zipfile.BadZipFile, OSError, RuntimeError) as e:
        raise InvalidContainerError(f"failed to read {name}", file_type, "read_part", e) from e
    return data.decode("utf-8", errors="replace")


def slide_part_names(package: zipfile.ZipFile) -> List[str]:
    """Slide part names in archive directory order (not numeric slide order)."""
    return [info.filename for info in package.infolist() if PPTX_SLIDE_PART_RE.match(info.filename)]


def recover_docx_text(xml_content: str) -> str:
    """
    Recover document body text.

    Runs inside a paragraph are concatenated without separator; paragraphs
    are joined with a single newline and the result is trimmed.
    """
    paragraphs = []
    for paragraph in DOCX_PARAGRAPH_RE.finditer(xml_content):
        paragraphs.append("".join(DOCX_RUN_RE.findall(paragraph.group(1))))
    return "\n".join(paragraphs).strip()


def recover_slide_text(xml_content: str) -> str:
    """Recover slide text: trimmed non-empty runs joined by a single space."""
    runs = (run.strip() for run in PPTX_RUN_RE.findall(xml_content))
    return " ".join(run for run in runs if run)
