from collections.abc import Callable

import pytest

PROSE = "the quick brown fox jumps over the lazy dog near the quiet river bank"

EDITAL_TEXT = "\n".join(
    [
        "Ministério da Educação",
        "O presidente torna publica a abertura do certame.",
        "",
        "CAPÍTULO I - Das Disposições Preliminares",
        "Texto introdutorio sobre o certame e suas regras gerais.",
        "",
        "DAS INSCRIÇÕES",
        "2. Condições Gerais",
        "2.1 Requisitos Básicos",
        "o candidato deverá possuir nacionalidade brasileira e estar quite com as"
        " obrigações eleitorais.",
        "2.2 Documentos Exigidos",
        "cópia autenticada do documento de identidade e comprovante de residência"
        " atualizado do candidato.",
        "",
        "CAPÍTULO II - Das Inscrições",
        "As inscrições serão realizadas exclusivamente via internet no endereço"
        " eletrônico oficial.",
        "01/03/2024",
        "",
    ]
)


@pytest.fixture
def edital_text() -> str:
    return EDITAL_TEXT


@pytest.fixture
def prose_wall() -> Callable[[int], str]:
    """Lowercase prose with no title cues at all, one sentence per line."""

    def build(lines: int) -> str:
        return "".join(f"{PROSE}\n" for _ in range(lines))

    return build


@pytest.fixture
def paragraphs_text() -> Callable[..., str]:
    """Blank-line separated paragraphs, each opened by a capitalized line."""

    def build(count: int, prose_lines: int = 12) -> str:
        paragraphs = []
        for number in range(1, count + 1):
            body = [f"Segue abaixo o bloco informativo numero {number}"]
            body.extend(PROSE for _ in range(prose_lines))
            paragraphs.append("\n".join(body))
        return "\n\n".join(paragraphs) + "\n"

    return build
