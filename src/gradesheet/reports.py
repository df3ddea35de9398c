"""Plain-text pass/fail reports."""

from .classify import Classification


def _section(title, records):
    return [f"{title}:"] + [str(record) for record in records]


def render(classification: Classification) -> str:
    """Render the passing and failing students as text.

    The report has an ``Aprobados:`` section listing every passing record,
    followed by a blank line and a ``Suspensos:`` section listing every
    failing record. Each record is shown as its full field mapping, including
    ``NotaFinal``.

    """
    lines = _section("Aprobados", classification.passing)
    lines.append("")
    lines.extend(_section("Suspensos", classification.failing))
    return "\n".join(lines) + "\n"
