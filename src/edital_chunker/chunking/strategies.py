# src/edital_chunker/chunking/strategies.py

"""Chunking strategies, tried in order until one gives a usable result.

Every strategy takes the normalized text as a list of lines (line endings
kept) and returns chunks that tile the text exactly: the first starts at 0,
each one ends where the next begins, the last ends at ``len(text)``.
"""

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from edital_chunker.observability import names
from edital_chunker.observability.base import MetricsHook

from .config import ChunkingConfig
from .models import TitleChunk
from .patterns import UPPER, clean_title, match_title
from .titles import infer_section_title

logger = logging.getLogger(__name__)

PREAMBLE_TITLE = "Preâmbulo"

# Semantic break rules
_CAPS_BREAK = re.compile(rf"^[{UPPER}\s\-()]{{15,}}")
_NUMBERED_BREAK = re.compile(rf"^\d+[.\-]\s*[{UPPER}]")
_ANCHOR_BREAK = re.compile(
    r"^(?:EDITAL|CONCURSO|ABERTURA|INSCRIÇÃO|INSCRIÇAO|PROVA|RESULTADO"
    r"|CRONOGRAMA|DISPOSIÇÃO|ANEXO|CARGO|VAGA|REQUISITO|ATRIBUIÇ)",
    re.IGNORECASE,
)
_PREPOSITION_BREAK = re.compile(rf"^(?:DOS?|DAS?|NOS?|NAS?)\s+[{UPPER}]", re.IGNORECASE)
_LEGISLATION_BREAK = re.compile(
    r"^(?:LEI|DECRETO|PORTARIA|RESOLUÇÃO|INSTRUÇÃO)", re.IGNORECASE
)
_CAPITALIZED = re.compile(rf"^[{UPPER}]")


ChunkBuilder = Callable[[list[str], ChunkingConfig], list[TitleChunk]]


@dataclass(frozen=True)
class ChunkingStrategy:
    """One tier of the escalation cascade."""

    name: str
    build: ChunkBuilder
    accepts: Callable[[list[TitleChunk], ChunkingConfig], bool]
    description: str


def _make_chunk(
    chunk_id: str, title: str, level: int, lines: list[str], start: int
) -> TitleChunk:
    content = "".join(lines)
    return TitleChunk(
        id=chunk_id,
        title=title,
        level=level,
        content=content,
        start_position=start,
        end_position=start + len(content),
    )


# =============================================================================
# Tier 0: title patterns
# =============================================================================


def build_title_chunks(lines: list[str], config: ChunkingConfig) -> list[TitleChunk]:
    """Open a new chunk at every title line.

    Text before the first title becomes the preamble. A title that shows up
    while the current chunk holds no text yet is adopted by that chunk.
    """
    chunks: list[TitleChunk] = []
    title, level = PREAMBLE_TITLE, 1
    buffer: list[str] = []
    has_text = False
    start = 0
    position = 0

    for line in lines:
        match = match_title(line)
        if match is not None:
            if has_text:
                chunks.append(
                    _make_chunk(f"chunk_{len(chunks)}", clean_title(title), level, buffer, start)
                )
                buffer = []
                has_text = False
                start = position
            title, level = match.text, match.level

        buffer.append(line)
        has_text = has_text or bool(line.strip())
        position += len(line)

    if buffer:
        chunks.append(
            _make_chunk(f"chunk_{len(chunks)}", clean_title(title), level, buffer, start)
        )

    return chunks


# =============================================================================
# Tier 1: semantic forced chunking
# =============================================================================


def is_semantic_break(line: str, previous_blank: bool) -> bool:
    """Looser break rules used once title matching found no structure."""
    length = len(line)
    if 15 < length < 150 and line == line.upper() and _CAPS_BREAK.match(line):
        return True
    if length > 10 and _NUMBERED_BREAK.match(line):
        return True
    if _ANCHOR_BREAK.match(line) or _LEGISLATION_BREAK.match(line):
        return True
    if length > 10 and _PREPOSITION_BREAK.match(line):
        return True
    return previous_blank and length > 20 and bool(_CAPITALIZED.match(line))


def _chunks_from_breaks(
    lines: list[str], breaks: list[int], prefix: str, config: ChunkingConfig
) -> list[TitleChunk]:
    """Cut ``lines`` at the given line indexes and infer a title per section."""
    bounds = [*breaks, len(lines)]
    chunks: list[TitleChunk] = []
    position = 0

    for first, last in zip(bounds, bounds[1:]):
        section = lines[first:last]
        if not section:
            continue
        index = len(chunks)
        title = infer_section_title(section, index, scan_lines=config.title_scan_lines)
        chunk = _make_chunk(f"{prefix}_{index}", title, 1 if index == 0 else 2, section, position)
        chunks.append(chunk)
        position = chunk.end_position

    return chunks


def build_semantic_chunks(lines: list[str], config: ChunkingConfig) -> list[TitleChunk]:
    """Break on semantic cues, but only once a chunk is big enough.

    A cue is ignored until the running chunk passes ``min_chunk_size``;
    past ``max_chunk_size`` the next text line breaks regardless.
    """
    breaks = [0]
    size = 0
    previous_blank = False

    for index, line in enumerate(lines):
        stripped = line.strip()
        if stripped and size > config.min_chunk_size:
            if size > config.max_chunk_size or is_semantic_break(stripped, previous_blank):
                breaks.append(index)
                size = 0
        size += len(line)
        previous_blank = not stripped

    logger.debug("Semantic break points found: %d sections", len(breaks))
    return _chunks_from_breaks(lines, breaks, "semantic_chunk", config)


# =============================================================================
# Tier 2: fixed-size forced chunking
# =============================================================================


def build_fixed_size_chunks(lines: list[str], config: ChunkingConfig) -> list[TitleChunk]:
    """Split the text lines into ``target_chunks`` roughly equal groups."""
    text_lines = [index for index, line in enumerate(lines) if line.strip()]
    if not text_lines:
        return []

    count = len(text_lines)
    target = config.target_chunks
    breaks: list[int] = []
    for group in range(target):
        first = group * count // target
        last = count if group == target - 1 else (group + 1) * count // target
        if first < last:
            breaks.append(text_lines[first])
    breaks[0] = 0

    chunks = _chunks_from_breaks(lines, breaks, "size_chunk", config)

    total_size = sum(len(line) for line in lines)
    if len(chunks) < 2 and total_size > config.size_split_threshold:
        logger.warning(
            "Fixed-size chunking produced %d chunk for %d characters, splitting at midpoint",
            len(chunks),
            total_size,
        )
        chunks = split_at_midpoint(lines, config)

    return chunks


def split_at_midpoint(lines: list[str], config: ChunkingConfig) -> list[TitleChunk]:
    """Two-way split: at the middle text line, or inside a lone line of text."""
    text_lines = [index for index, line in enumerate(lines) if line.strip()]
    if len(text_lines) >= 2:
        return _chunks_from_breaks(
            lines, [0, text_lines[len(text_lines) // 2]], "size_chunk", config
        )

    text = "".join(lines)
    cut = _midpoint_cut(text)
    if cut is None:
        return _chunks_from_breaks(lines, [0], "size_chunk", config)
    return _chunks_from_breaks([text[:cut], text[cut:]], [0, 1], "size_chunk", config)


def _midpoint_cut(text: str) -> int | None:
    """Offset near the middle of ``text`` with non-blank text on both sides.

    None when fewer than two non-blank characters leave nothing to split.
    """
    first = len(text) - len(text.lstrip())
    last = len(text.rstrip())
    if last - first < 2:
        return None
    middle = (first + last) // 2

    gaps = [
        gap.start()
        for gap in re.finditer(r"\s+", text)
        if first < gap.start() and gap.end() < last
    ]
    if not gaps:
        return middle
    return min(gaps, key=lambda offset: abs(offset - middle))


# =============================================================================
# Cascade
# =============================================================================


DEFAULT_STRATEGIES: tuple[ChunkingStrategy, ...] = (
    ChunkingStrategy(
        name="title",
        build=build_title_chunks,
        accepts=lambda chunks, config: len(chunks) >= config.min_title_chunks,
        description="Title pattern matching",
    ),
    ChunkingStrategy(
        name="semantic",
        build=build_semantic_chunks,
        accepts=lambda chunks, config: len(chunks) >= config.min_semantic_chunks,
        description="Semantic break rules",
    ),
    ChunkingStrategy(
        name="fixed_size",
        build=build_fixed_size_chunks,
        accepts=lambda chunks, config: True,
        description="Equal groups of lines",
    ),
)


def run_strategies(
    lines: list[str],
    config: ChunkingConfig,
    strategies: Sequence[ChunkingStrategy],
    metrics_hook: MetricsHook,
) -> tuple[str, list[TitleChunk]]:
    """Return the name and output of the first strategy whose result is accepted.

    When none is accepted the last strategy's output is returned.
    """
    if not strategies:
        raise ValueError("strategies must not be empty")

    chunks: list[TitleChunk] = []
    for strategy in strategies:
        chunks = strategy.build(lines, config)
        if strategy.accepts(chunks, config):
            logger.debug(
                "Strategy %s accepted: %d chunks (%s)",
                strategy.name,
                len(chunks),
                strategy.description,
            )
            return strategy.name, chunks

        logger.debug(
            "Strategy %s rejected: %d chunks, escalating",
            strategy.name,
            len(chunks),
        )
        metrics_hook.increment(
            names.CHUNKING_ESCALATIONS_TOTAL, labels={"strategy": strategy.name}
        )

    return strategies[-1].name, chunks
