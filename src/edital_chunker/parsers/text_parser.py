# parsers/text_parser.py

from pathlib import Path

from .base import TextExtractor
from .models import ExtractedText


class PlainTextExtractor(TextExtractor):
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def extract(self, source: str | Path) -> ExtractedText:
        # newline="" keeps CR/CRLF so the chunker sees the original breaks
        with open(source, encoding=self.encoding, newline="") as f:
            text = f.read()
        return ExtractedText(text=text, metadata={"source_type": "text"})
