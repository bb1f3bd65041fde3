from .base import TextExtractor
from .factory import (
    SUPPORTED_EXTENSIONS,
    create_text_extractor,
    detect_file_type,
    extract_text,
)
from .models import ExtractedText
from .pdf_parser import PdfTextExtractor
from .text_parser import PlainTextExtractor

__all__ = [
    "ExtractedText",
    "PdfTextExtractor",
    "PlainTextExtractor",
    "SUPPORTED_EXTENSIONS",
    "TextExtractor",
    "create_text_extractor",
    "detect_file_type",
    "extract_text",
]
