# parsers/factory.py

import logging
from pathlib import Path
from time import monotonic

from edital_chunker.errors import (
    ExtractionError,
    FileTooLargeError,
    UnsupportedFileTypeError,
)
from edital_chunker.observability import names
from edital_chunker.observability.base import MetricsHook, NoOpMetricsHook

from .base import TextExtractor
from .models import ExtractedText

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {
    ".pdf": "pdf",
    ".txt": "text",
}

DEFAULT_MAX_FILE_SIZE_MB = 15.0


def detect_file_type(file_name: str) -> str | None:
    return SUPPORTED_EXTENSIONS.get(Path(file_name).suffix.lower())


def create_text_extractor(file_name: str) -> TextExtractor:
    """Create the extractor matching a file name's extension.

    Raises:
        UnsupportedFileTypeError: If the extension is not supported.
    """
    file_type = detect_file_type(file_name)

    if file_type == "pdf":
        from .pdf_parser import PdfTextExtractor

        return PdfTextExtractor()

    if file_type == "text":
        from .text_parser import PlainTextExtractor

        return PlainTextExtractor()

    raise UnsupportedFileTypeError(file_name)


def extract_text(
    file_path: str | Path,
    file_name: str,
    *,
    max_file_size_mb: float = DEFAULT_MAX_FILE_SIZE_MB,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ExtractedText:
    """Extract plain text from an uploaded file.

    ``file_name`` is the name the user uploaded, which picks the extractor;
    ``file_path`` is where the bytes live (often a temp name without suffix).

    Raises:
        FileNotFoundError: If ``file_path`` does not exist.
        UnsupportedFileTypeError: If the extension is not supported.
        FileTooLargeError: If the file exceeds ``max_file_size_mb``.
        ExtractionError: If the backend fails to read the file.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    extractor = create_text_extractor(file_name)

    size_mb = path.stat().st_size / (1024 * 1024)
    if size_mb > max_file_size_mb:
        raise FileTooLargeError(file_name, size_mb, max_file_size_mb)

    file_type = detect_file_type(file_name) or "unknown"
    logger.info("Extracting %s: %s (%.2fMB)", file_type, file_name, size_mb)

    start = monotonic()
    try:
        extracted = extractor.extract(path)
    except Exception as e:
        metrics_hook.increment(
            names.EXTRACTION_ERRORS_TOTAL, labels={"file_type": file_type}
        )
        logger.error("Failed extracting text from %s: %s", file_name, e)
        raise ExtractionError(f"Failed to extract text from {file_name}") from e

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.EXTRACTION_DURATION, elapsed_ms)
    metrics_hook.increment(
        names.EXTRACTION_DOCUMENTS_TOTAL, labels={"file_type": file_type}
    )
    metrics_hook.record_gauge(names.EXTRACTION_CHARACTERS, len(extracted.text))

    logger.info(
        "Extracted %d characters from %s, latency=%.0fms",
        len(extracted.text),
        file_name,
        elapsed_ms,
    )
    return extracted
