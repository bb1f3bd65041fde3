# src/edital_chunker/chunking/render.py

from .models import DocumentSummary

INDENT = "  "


def _preview(content: str, max_chars: int) -> str:
    flat = " ".join(content.split())
    if len(flat) <= max_chars:
        return flat
    return flat[: max_chars - 3] + "..."


def render_summary(summary: DocumentSummary, *, preview_chars: int = 100) -> str:
    """Indented outline of a summary, one title and content preview per chunk."""
    lines = [f"SUMÁRIO: {summary.document_name}", ""]

    for chunk in summary.structure:
        indent = INDENT * max(chunk.level - 1, 0)
        lines.append(f"{indent}• {chunk.title}")
        lines.append(f"{indent}{INDENT}{_preview(chunk.content, preview_chars)}")
        lines.append("")

    return "\n".join(lines)
