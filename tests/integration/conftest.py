from pathlib import Path

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

PAGE_ONE = [
    "Ministerio da Educacao",
    "O presidente torna publica a abertura do certame.",
    "CAPITULO I - Das Disposicoes Preliminares",
    "Texto introdutorio sobre o certame e suas regras gerais.",
    "DAS INSCRICOES",
    "2.1 Requisitos Basicos",
    "o candidato devera possuir nacionalidade brasileira.",
]

PAGE_TWO = [
    "CAPITULO II - Dos Pedidos",
    "Os pedidos serao recebidos em ate dois dias.",
]


def _draw_page(c: canvas.Canvas, lines: list[str]) -> None:
    _, height = A4
    text = c.beginText(40, height - 50)
    for line in lines:
        text.textLine(line)
    c.drawText(text)
    c.showPage()


def _create_edital_pdf(path: Path) -> None:
    """Creates a deterministic two-page edital for integration testing."""
    c = canvas.Canvas(str(path), pagesize=A4)
    _draw_page(c, PAGE_ONE)
    _draw_page(c, PAGE_TWO)
    c.save()


def _create_blank_pdf(path: Path) -> None:
    c = canvas.Canvas(str(path), pagesize=A4)
    c.showPage()
    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _create_edital_pdf(dir_path / "edital.pdf")
    _create_blank_pdf(dir_path / "blank.pdf")

    return dir_path
