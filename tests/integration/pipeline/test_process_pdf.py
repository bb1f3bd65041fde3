from pathlib import Path

from edital_chunker import process_document, render_summary, summary_to_dict


def test_pdf_is_split_by_titles(pdf_dir: Path) -> None:
    summary = process_document(pdf_dir / "edital.pdf", "edital.pdf")

    assert [(c.title, c.level, c.parent_id) for c in summary.structure] == [
        ("Preâmbulo", 1, None),
        ("Das Disposicoes Preliminares", 1, None),
        ("Das Inscricoes", 2, "chunk_1"),
        ("Requisitos Basicos", 3, "chunk_2"),
        ("Dos Pedidos", 1, None),
    ]


def test_page_break_does_not_leak_into_content(pdf_dir: Path) -> None:
    summary = process_document(pdf_dir / "edital.pdf", "edital.pdf")

    assert all("\f" not in c.content for c in summary.structure)
    assert summary.structure[-1].content.startswith("CAPITULO II")


def test_summary_renders_and_serializes(pdf_dir: Path) -> None:
    summary = process_document(pdf_dir / "edital.pdf", "edital.pdf")

    rendered = render_summary(summary)
    payload = summary_to_dict(summary)

    assert rendered.startswith("SUMÁRIO: edital.pdf\n")
    assert "    • Requisitos Basicos" in rendered
    assert payload["totalChunks"] == 5
    assert payload["structure"][3]["parentId"] == "chunk_2"


def test_blank_pdf_gives_single_chunk(pdf_dir: Path) -> None:
    summary = process_document(pdf_dir / "blank.pdf", "blank.pdf")
    assert summary.total_chunks <= 1
