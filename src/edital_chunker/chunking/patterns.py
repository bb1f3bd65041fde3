# src/edital_chunker/chunking/patterns.py

"""Line-level title detection for edital text.

A line is checked against cheap rejection filters, then against an ordered
list of title rules (first valid match wins), then against a contextual
keyword fallback. Rules are plain data so each one can be tested alone.
"""

import re
import string
from collections.abc import Callable
from dataclasses import dataclass

from .levels import (
    DEFAULT_LEVEL,
    decimal_level,
    structural_level,
    uppercase_level,
)

# Uppercase Latin-1 letters, accented ones included (no × or ß).
UPPER = "A-ZÀ-ÖØ-Þ"

MIN_LINE_LENGTH = 3
MAX_LINE_LENGTH = 200
MAX_LOWERCASE_LINE_LENGTH = 50

MIN_TITLE_LENGTH = 2
MAX_TITLE_LENGTH = 150
MAX_DIGIT_RATIO = 0.3
MAX_PUNCTUATION_RATIO = 0.2

# Shared by the structural rule and title cleaning.
_STRUCTURAL_KEYWORD = r"CAP[IÍ]TULO|T[IÍ]TULO|PARTE|SE[CÇ][AÃ]O|ANEXO|AP[EÊ]NDICE"
_NUMERAL = r"(?:(?-i:[IVXLC]+)|\d+)\b"

CONTEXT_KEYWORDS = (
    "EDITAL",
    "CONCURSO",
    "SELEÇÃO",
    "PROCESSO SELETIVO",
    "REQUISITOS",
    "ATRIBUIÇÕES",
    "REMUNERAÇÃO",
    "SALÁRIO",
    "INSCRIÇÃO",
    "TAXA",
    "DOCUMENTAÇÃO",
    "CRONOGRAMA",
    "PROVA",
    "EXAME",
    "AVALIAÇÃO",
    "TESTE",
    "RESULTADO",
    "CLASSIFICAÇÃO",
    "CONVOCAÇÃO",
    "POSSE",
    "EXERCÍCIO",
    "LOTAÇÃO",
    "IMPUGNAÇÃO",
    "RECURSO",
    "QUESTIONAMENTO",
)
MIN_CONTEXT_LENGTH = 5
MAX_CONTEXT_LENGTH = 100
MAX_CONTEXT_COLON_LENGTH = 80

_DATE = re.compile(r"^(?:\d{4}[-/]\d{1,2}[-/]\d{1,2}|\d{1,2}[-/]\d{1,2}[-/]\d{2,4})")
_EMBEDDED_DATE = re.compile(r"\d{2}/\d{2}/\d{4}")
_DECIMAL_NUMBER = re.compile(r"^\d+[.,]\d+$")
_LEADING_DECIMAL_NUMBER = re.compile(r"^\d+[.,]\d+")
_PUNCTUATION = re.compile(r"[^\w\s\-()\[\]]")

# Keywords only count at the start of a word, so "comprovante" is not PROVA
# and "SUBTESTE" is not TESTE. Longer words such as "RECURSOS" still match.
_CONTEXT_KEYWORD = re.compile(
    r"\b(?:" + "|".join(re.escape(k) for k in CONTEXT_KEYWORDS) + ")",
    re.IGNORECASE,
)
_CONTEXT_COLON = re.compile(rf"^[{UPPER}][{UPPER}\s\-]{{5,}}:$")

_LEADING_DASHES = re.compile(r"^[-–—]+")
_TRAILING_DASHES = re.compile(r"[-–—]+$")
_LEADING_NUMBERING = re.compile(r"^\d+(?:\.\d+)*\.?\s*")
_STRUCTURAL_PREFIX = re.compile(
    rf"^(?:{_STRUCTURAL_KEYWORD})\s+{_NUMERAL}\s*[-–—:.]?\s*", re.IGNORECASE
)
_EDGE_PUNCTUATION_START = re.compile(r"^[^\w\s]+")
_EDGE_PUNCTUATION_END = re.compile(r"[^\w\s]+$")

PREPOSITION_OPENER = re.compile(
    rf"^(?:DOS?|DAS?|NOS?|NAS?|DES?)\s+[{UPPER}][{UPPER}\s]{{2,}}"
)


@dataclass(frozen=True)
class TitleMatch:
    text: str
    level: int
    rule: str


@dataclass(frozen=True)
class TitleRule:
    """One pattern family: a regex, how to pull the title out, and its level."""

    name: str
    pattern: re.Pattern[str]
    extract: Callable[[re.Match[str]], str]
    level: Callable[[re.Match[str]], int]

    def apply(self, line: str) -> TitleMatch | None:
        match = self.pattern.match(line)
        if match is None:
            return None
        text = self.extract(match)
        if not is_valid_title_text(text):
            return None
        return TitleMatch(text=clean_title_text(text), level=self.level(match), rule=self.name)


def _whole_line(match: re.Match[str]) -> str:
    return match.string


def _default_level(match: re.Match[str]) -> int:
    return DEFAULT_LEVEL


# Order matters: first valid match wins.
TITLE_RULES: tuple[TitleRule, ...] = (
    TitleRule(
        name="structural",
        pattern=re.compile(
            rf"^({_STRUCTURAL_KEYWORD})\s+{_NUMERAL}[\s\-–—:.]*(.*)$",
            re.IGNORECASE,
        ),
        extract=lambda m: m.group(2).strip() or m.string,
        level=lambda m: structural_level(m.group(1)),
    ),
    TitleRule(
        name="decimal",
        pattern=re.compile(r"^(\d+\.(?:\d+\.?){0,3})\s*([^\W\d_].*)$"),
        extract=lambda m: m.group(2),
        level=lambda m: decimal_level(m.group(1)),
    ),
    TitleRule(
        name="preposition",
        pattern=PREPOSITION_OPENER,
        extract=_whole_line,
        level=_default_level,
    ),
    TitleRule(
        name="keyword",
        pattern=re.compile(
            r"^(?:DISPOSI[CÇ][OÕ]ES\s+(?:GERAIS|FINAIS|PRELIMINARES)"
            r"|CRONOGRAMA|RECURSOS?|IMPUGNA[CÇ][OÕ]ES|INSCRI[CÇ][OÕ]ES"
            r"|PROVAS?|AVALIA[CÇ][AÃ]O|RESULTADO|CLASSIFICA[CÇ][AÃ]O"
            r"|NOMEA[CÇ][AÃ]O|HOMOLOGA[CÇ][AÃ]O)\b",
            re.IGNORECASE,
        ),
        extract=_whole_line,
        level=_default_level,
    ),
    TitleRule(
        name="uppercase",
        pattern=re.compile(rf"^[{UPPER}][{UPPER}\s\-]{{8,}}$"),
        extract=_whole_line,
        level=lambda m: uppercase_level(m.string),
    ),
    TitleRule(
        name="colon_or_dash",
        pattern=re.compile(rf"^([{UPPER}][{UPPER}\s]{{4,}}?)(?:\s*:$|\s+[-–—])"),
        extract=lambda m: m.group(1),
        level=_default_level,
    ),
)


def is_rejected_line(line: str) -> bool:
    """Lines that are never titles, whatever pattern they happen to match."""
    if len(line) < MIN_LINE_LENGTH or len(line) > MAX_LINE_LENGTH:
        return True
    if _DATE.match(line) or _DECIMAL_NUMBER.match(line):
        return True
    # Long lines starting lowercase are prose continuations.
    return line[0].islower() and len(line) > MAX_LOWERCASE_LINE_LENGTH


def is_valid_title_text(text: str) -> bool:
    cleaned = text.strip()
    if not MIN_TITLE_LENGTH <= len(cleaned) <= MAX_TITLE_LENGTH:
        return False

    digits = sum(1 for char in cleaned if char.isdigit())
    if digits > len(cleaned) * MAX_DIGIT_RATIO:
        return False

    punctuation = len(_PUNCTUATION.findall(cleaned))
    return punctuation <= len(cleaned) * MAX_PUNCTUATION_RATIO


def match_title(line: str) -> TitleMatch | None:
    """Classify a single line. Returns None when it is not a title."""
    candidate = line.strip()
    if is_rejected_line(candidate):
        return None

    for rule in TITLE_RULES:
        result = rule.apply(candidate)
        if result is not None:
            return result

    return match_contextual_title(candidate)


def match_contextual_title(line: str) -> TitleMatch | None:
    """Fallback for titles that follow no structural convention."""
    if (
        MIN_CONTEXT_LENGTH <= len(line) <= MAX_CONTEXT_LENGTH
        and _CONTEXT_KEYWORD.search(line)
        and not _LEADING_DECIMAL_NUMBER.match(line)
        and not _EMBEDDED_DATE.search(line)
    ):
        return TitleMatch(
            text=clean_title_text(line), level=DEFAULT_LEVEL, rule="contextual_keyword"
        )

    if len(line) <= MAX_CONTEXT_COLON_LENGTH and _CONTEXT_COLON.match(line):
        return TitleMatch(
            text=clean_title_text(line[:-1]),
            level=DEFAULT_LEVEL + 1,
            rule="contextual_colon",
        )

    return None


def has_context_keyword(line: str) -> bool:
    return _CONTEXT_KEYWORD.search(line) is not None


def is_all_caps(line: str) -> bool:
    return any(char.isalpha() for char in line) and line == line.upper()


def clean_title_text(text: str) -> str:
    """Drop dashes, outline numbering and structural prefixes around a title."""
    stripped = text.strip()
    cleaned = _LEADING_DASHES.sub("", stripped)
    cleaned = _TRAILING_DASHES.sub("", cleaned).strip()
    cleaned = _LEADING_NUMBERING.sub("", cleaned)
    cleaned = _STRUCTURAL_PREFIX.sub("", cleaned).strip()
    return cleaned or stripped


def clean_title(title: str) -> str:
    """Display form: no edge punctuation, single spaces, Each Word Capitalized."""
    stripped = title.strip()
    cleaned = _EDGE_PUNCTUATION_START.sub("", stripped)
    cleaned = _EDGE_PUNCTUATION_END.sub("", cleaned)
    if not cleaned.strip():
        return stripped
    return string.capwords(cleaned)
