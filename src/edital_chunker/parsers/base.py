# parsers/base.py

from abc import ABC, abstractmethod
from pathlib import Path

from .models import ExtractedText


class TextExtractor(ABC):
    @abstractmethod
    def extract(self, source: str | Path) -> ExtractedText:
        """
        Extract the plain text of a document.

        Requirements:
        - Deterministic output for same input
        - Page breaks may be left as form feeds; the chunker normalizes them
        - No structure detection here
        """
        raise NotImplementedError
