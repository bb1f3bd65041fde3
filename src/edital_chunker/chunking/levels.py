# src/edital_chunker/chunking/levels.py

"""Hierarchy levels for matched titles.

Level 1 is the outermost section. Deeper outline numbering nests further.
"""

DEFAULT_LEVEL = 2

# Free-standing all-caps lines longer than this sit one level deeper.
UPPERCASE_LEVEL_CUTOFF = 50

_TOP_LEVEL_KEYWORDS = frozenset({"CAPÍTULO", "CAPITULO", "TÍTULO", "TITULO", "PARTE"})


def structural_level(keyword: str) -> int:
    """CAPÍTULO, TÍTULO and PARTE open level 1; SEÇÃO, ANEXO and APÊNDICE level 2."""
    return 1 if keyword.upper() in _TOP_LEVEL_KEYWORDS else DEFAULT_LEVEL


def decimal_level(numbering: str) -> int:
    """Map outline numbering to a level: ``2.`` -> 2, ``2.1`` -> 3, ``2.1.1`` -> 4."""
    depth = len([part for part in numbering.split(".") if part])
    return depth + 1


def uppercase_level(line: str) -> int:
    return DEFAULT_LEVEL if len(line) <= UPPERCASE_LEVEL_CUTOFF else DEFAULT_LEVEL + 1
