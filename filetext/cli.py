"""
filetext CLI - Extract plain text from a file.

Usage:
    filetext <path>                          # Print extracted text
    filetext notes.dat --type md             # Force the Markdown extractor
    filetext report.pdf --json               # Print text, metadata and timing as JSON
    filetext big.txt --max-size 0 --timeout 0
"""
import argparse
import dataclasses
import json
import sys
from typing import List, Optional

from .core.exceptions import ExtractorError
from .core.logging_config import setup_logging, get_logger
from .domain.entities import default_extract_options
from .services.extraction_service import ExtractionService
from .utils.validators import validate_file_type_hint

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = default_extract_options()
    parser = argparse.ArgumentParser(
        prog="filetext",
        description="Extract plain text and metadata from documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  filetext document.docx
  filetext data.bin --type csv --json
  filetext README --type md --preserve-formatting
        """,
    )
    parser.add_argument("path", help="File to extract text from")
    parser.add_argument(
        "--type", "-t",
        dest="file_type",
        default="",
        metavar="EXT",
        help="Extension override (e.g. csv, md); skips content detection",
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=defaults.max_file_size,
        metavar="BYTES",
        help=f"Maximum file size in bytes, 0 for unlimited (default: {defaults.max_file_size})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=defaults.timeout,
        metavar="SECONDS",
        help=f"Extraction timeout in seconds, 0 for unlimited (default: {defaults.timeout:g})",
    )
    parser.add_argument(
        "--preserve-formatting",
        action="store_true",
        default=defaults.preserve_formatting,
        help="Keep Markdown syntax instead of stripping it",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result (text, metadata, timing) as JSON",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level for messages on stderr (default: WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(log_level=args.log_level)

    try:
        file_type = validate_file_type_hint(args.file_type)
    except ValueError as e:
        parser.error(str(e))

    options = dataclasses.replace(
        default_extract_options(),
        file_type=file_type,
        max_file_size=args.max_size,
        timeout=args.timeout,
        preserve_formatting=args.preserve_formatting,
    )

    try:
        result = ExtractionService().extract_file(args.path, options)
    except ExtractorError as e:
        print(f"Error extracting text from {args.path}: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    if args.json:
        output = result.to_dict()
        output["path"] = args.path
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
