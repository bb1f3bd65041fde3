# src/edital_chunker/chunking/normalize.py

import re

# PDF page breaks arrive as form feeds; some extractors emit the Unicode
# line/paragraph separators or old Mac CRs instead of \n.
_LINE_BREAKS = re.compile(r"\r\n|[\r\f\v\x85\u2028\u2029]")

# Three or more breaks, with whitespace-only lines counting as breaks.
_EXCESS_BLANK_LINES = re.compile(r"\n[ \t]*\n(?:[ \t]*\n)+")


def normalize_line_breaks(text: str) -> str:
    """Return ``text`` using only ``\\n``, with at most one blank line in a row.

    Every line heuristic downstream assumes this shape; run it first.
    """
    text = _LINE_BREAKS.sub("\n", text)
    return _EXCESS_BLANK_LINES.sub("\n\n", text)


def split_lines(text: str) -> list[str]:
    """Split normalized text into lines, keeping their trailing ``\\n``.

    ``"".join(split_lines(text)) == text`` for any normalized text.
    """
    return text.splitlines(keepends=True)
