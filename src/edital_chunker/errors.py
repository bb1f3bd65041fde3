# src/edital_chunker/errors.py

"""Exceptions raised by the ingestion side of edital-chunker.

The chunking engine itself never raises for string input; these cover
reading files before any text reaches it.
"""


class EditalChunkerError(Exception):
    """Base class for every error raised by this package."""


class ExtractionError(EditalChunkerError):
    """Text could not be extracted from a source file."""


class UnsupportedFileTypeError(ExtractionError):
    def __init__(self, file_name: str):
        super().__init__(f"Unsupported file type: {file_name}")
        self.file_name = file_name


class FileTooLargeError(ExtractionError):
    def __init__(self, file_name: str, size_mb: float, limit_mb: float):
        super().__init__(
            f"File {file_name} is {size_mb:.2f}MB, limit is {limit_mb:.2f}MB"
        )
        self.file_name = file_name
        self.size_mb = size_mb
        self.limit_mb = limit_mb
