"""Checagem estrutural de seções e linhas (single_select)."""

from __future__ import annotations

from typing import Any

from interactive_buttons.adapters.whatsapp.validators.errors import ValidationIssue
from interactive_buttons.domain.enums import ElementKind, IssueCode

_ROW_REQUIRED = ("title", "id")


def is_blank(value: Any) -> bool:
    """Campo ausente para fins de validação: None ou string vazia."""
    return value is None or (isinstance(value, str) and not value.strip())


def _structure_issue(position: int, field: str, message: str) -> ValidationIssue:
    return ValidationIssue(
        code=IssueCode.INVALID_STRUCTURE,
        message=message,
        position=position,
        kind=ElementKind.SINGLE_SELECT.value,
        field=field,
    )


def _check_rows(
    rows: Any,
    position: int,
    section_index: int,
) -> list[ValidationIssue]:
    path = f"sections[{section_index}].rows"
    if not isinstance(rows, list) or not rows:
        return [
            _structure_issue(
                position,
                path,
                f"section {section_index} must have at least one row",
            )
        ]

    issues: list[ValidationIssue] = []
    for row_index, row in enumerate(rows):
        row_path = f"{path}[{row_index}]"
        if not isinstance(row, dict):
            issues.append(
                _structure_issue(
                    position,
                    row_path,
                    f"section {section_index} row {row_index} must be an object",
                )
            )
            continue
        for name in _ROW_REQUIRED:
            if is_blank(row.get(name)):
                issues.append(
                    _structure_issue(
                        position,
                        f"{row_path}.{name}",
                        f"section {section_index} row {row_index} "
                        f"is missing required field '{name}'",
                    )
                )
    return issues


def check_sections(parameters: dict[str, Any], position: int) -> list[ValidationIssue]:
    """Valida seções de um single_select.

    Regras: ao menos uma seção; toda seção com `rows` não vazio; toda linha
    com `title` e `id`. Ausência de `sections` é reportada como campo
    obrigatório pelo validador, não aqui.

    Args:
        parameters: Parâmetros já desserializados
        position: Índice do elemento na entrada

    Returns:
        Lista de problemas (vazia = OK)
    """
    sections = parameters.get("sections")
    if sections is None:
        return []

    if not isinstance(sections, list) or not sections:
        return [
            _structure_issue(
                position,
                "sections",
                "single_select requires at least one section",
            )
        ]

    issues: list[ValidationIssue] = []
    for section_index, section in enumerate(sections):
        if not isinstance(section, dict):
            issues.append(
                _structure_issue(
                    position,
                    f"sections[{section_index}]",
                    f"section {section_index} must be an object",
                )
            )
            continue
        issues.extend(_check_rows(section.get("rows"), position, section_index))
    return issues
