"""Erros de validação para mensagens interativas."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from typing import Any

from interactive_buttons.adapters.whatsapp.validators.rules import example_for
from interactive_buttons.domain.enums import IssueCode


class ValidationError(Exception):
    """Erro de validação de mensagem.

    Contém mensagem descritiva do erro de validação.
    """

    pass


class PayloadBuildError(Exception):
    """Falha ao montar payload já validado (defeito interno, não do chamador)."""

    pass


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """Um problema encontrado pelo validador.

    position é o índice (0-based) do elemento na entrada; None quando o
    problema é da mensagem como um todo.
    """

    code: IssueCode
    message: str
    position: int | None = None
    kind: str | None = None
    field: str | None = None

    def describe(self) -> str:
        """Linha legível: posição, tipo, campo e mensagem."""
        where = "message" if self.position is None else f"button[{self.position}]"
        if self.kind:
            where = f"{where} ({self.kind})"
        if self.field:
            where = f"{where} field '{self.field}'"
        return f"{where}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["code"] = self.code.value
        return data


class InteractiveValidationError(ValidationError):
    """Erro agregado com todos os problemas de uma validação.

    Levantado antes de qualquer interação com o transporte.
    """

    def __init__(self, issues: Iterable[ValidationIssue]) -> None:
        self.issues: tuple[ValidationIssue, ...] = tuple(issues)
        super().__init__(self.render())

    def render(self) -> str:
        """Uma linha por problema, na ordem da entrada."""
        header = (
            f"Interactive message validation failed with {len(self.issues)} error(s):"
        )
        lines = [f"  - {issue.describe()}" for issue in self.issues]
        return "\n".join([header, *lines])

    def format_detailed(self) -> str:
        """Renderização com exemplo de uso para cada tipo com falha."""
        parts = [self.render()]
        seen: set[str] = set()
        for issue in self.issues:
            if not issue.kind or issue.kind in seen:
                continue
            example = example_for(issue.kind)
            if example is None:
                continue
            seen.add(issue.kind)
            parts.append(
                f"Example for {issue.kind}: "
                f"{json.dumps(example, ensure_ascii=False)}"
            )
        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "interactive_validation_failed",
            "count": len(self.issues),
            "issues": [issue.to_dict() for issue in self.issues],
        }
