# parsers/pdf_parser.py

import logging
from pathlib import Path
from typing import Any, cast

import pdfplumber

from .base import TextExtractor
from .models import ExtractedText

PAGE_BREAK = "\f"


class PdfTextExtractor(TextExtractor):
    """
    Linearized PDF text.
    - Uses page order
    - Joins pages with form feeds
    - No layout or font information

    pdfminer logs every malformed object reference at WARNING. Pass
    ``quiet_pdfminer=True`` to raise its logger to ERROR when extracting;
    by default logger configuration is left to the application.
    """

    def __init__(self, quiet_pdfminer: bool = False):
        self.quiet_pdfminer = quiet_pdfminer

    def extract(self, source: str | Path) -> ExtractedText:
        if self.quiet_pdfminer:
            logging.getLogger("pdfminer").setLevel(logging.ERROR)

        # pdfplumber.open accepts path-like or buffer objects; cast to Any
        with pdfplumber.open(cast(Any, source)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]

        return ExtractedText(
            text=PAGE_BREAK.join(pages),
            metadata={"source_type": "pdf", "page_count": len(pages)},
        )
