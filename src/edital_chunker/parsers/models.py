# parsers/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExtractedText:
    text: str
    metadata: dict = field(default_factory=dict)
