# src/edital_chunker/chunking/titles.py

import re

from .patterns import clean_title, clean_title_text, is_all_caps

GENERIC_SECTION_TITLES = (
    "Preâmbulo",
    "Informações do Concurso",
    "Das Inscrições",
    "Das Provas e Avaliação",
    "Do Resultado e Classificação",
    "Das Disposições Gerais",
    "Anexos e Complementos",
)

SECTION_KEYWORDS = (
    "EDITAL",
    "CONCURSO",
    "INSCRIÇÃO",
    "INSCRIÇAO",
    "PROVA",
    "RESULTADO",
    "CRONOGRAMA",
    "DISPOSIÇÃO",
    "DISPOSIÇÕES",
    "ANEXO",
    "REQUISITOS",
    "ATRIBUIÇÕES",
    "REMUNERAÇÃO",
    "CARGO",
    "VAGA",
    "SALÁRIO",
    "BENEFÍCIO",
)

_SECTION_KEYWORD = re.compile(
    r"\b(?:" + "|".join(re.escape(k) for k in SECTION_KEYWORDS) + ")",
    re.IGNORECASE,
)
_LOOSE_PREPOSITION_OPENER = re.compile(
    r"^(?:DOS?|DAS?|NOS?|NAS?)\s+[A-ZÀ-ÖØ-Þ\s]{3,}", re.IGNORECASE
)

# Exclusive bounds on the length of a line considered as a title.
MIN_CANDIDATE_LENGTH = 10
MAX_CANDIDATE_LENGTH = 120
MIN_CAPS_LENGTH = 15
MAX_CAPS_LENGTH = 80


def generic_section_title(index: int) -> str:
    if 0 <= index < len(GENERIC_SECTION_TITLES):
        return GENERIC_SECTION_TITLES[index]
    return f"Seção {index + 1}"


def infer_section_title(lines: list[str], index: int, *, scan_lines: int = 10) -> str:
    """Pick a title for a section whose boundary was not itself a title line.

    Looks at the first ``scan_lines`` non-blank lines for a keyword line,
    an all-caps line or a DO/DA/DOS/DAS opener, in that order per line.
    Falls back to a generic name chosen by the section's position.
    """
    candidates = [line.strip() for line in lines if line.strip()][:scan_lines]

    for line in candidates:
        if not MIN_CANDIDATE_LENGTH < len(line) < MAX_CANDIDATE_LENGTH:
            continue
        if (
            _SECTION_KEYWORD.search(line)
            or (is_all_caps(line) and MIN_CAPS_LENGTH < len(line) < MAX_CAPS_LENGTH)
            or _LOOSE_PREPOSITION_OPENER.match(line)
        ):
            return clean_title(clean_title_text(line))

    return generic_section_title(index)
