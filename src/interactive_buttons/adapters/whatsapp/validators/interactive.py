"""Validador de mensagens interativas (native flow).

Percorre os elementos da mensagem aplicando a tabela de regras,
desserializa `parameters` em string e acumula todos os problemas
encontrados. Nunca interrompe no primeiro erro.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from interactive_buttons.adapters.whatsapp.validators.errors import ValidationIssue
from interactive_buttons.adapters.whatsapp.validators.rules import (
    SECTIONS_STRUCTURE,
    KindRule,
    requirements_for,
)
from interactive_buttons.adapters.whatsapp.validators.sections import (
    check_sections,
    is_blank,
)
from interactive_buttons.config.settings import Settings, get_settings
from interactive_buttons.domain.enums import ElementKind, IssueCode
from interactive_buttons.domain.models import (
    InteractiveElement,
    LegacyButton,
    MessageDescriptor,
    NormalizedDescriptor,
)
from interactive_buttons.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

NormalizedElement = InteractiveElement | LegacyButton

_LEGACY_KEYS = frozenset({"id", "text", "buttonId", "buttonText"})


def _is_legacy_shape(raw: dict[str, Any]) -> bool:
    """Forma abreviada: tem id/text e não tem name/kind."""
    if "kind" in raw or "name" in raw:
        return False
    return bool(_LEGACY_KEYS & raw.keys())


def _legacy_text(raw: dict[str, Any]) -> Any:
    if "text" in raw:
        return raw["text"]
    button_text = raw.get("buttonText")
    if isinstance(button_text, dict):
        return button_text.get("displayText")
    return button_text


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and not is_blank(value)


def _first_present(raw: dict[str, Any], *keys: str) -> tuple[str | None, Any]:
    """Primeira chave com valor não nulo, na ordem dada."""
    for key in keys:
        if raw.get(key) is not None:
            return key, raw[key]
    return None, None


def _parse_error_message(exc: Exception) -> str:
    if isinstance(exc, json.JSONDecodeError):
        return exc.msg
    return "nesting too deep"


class InteractiveMessageValidator:
    """Validador de descritores de mensagem interativa.

    Não guarda estado entre chamadas: cada validação acumula seus
    problemas em uma lista local.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def validate(
        self,
        descriptor: MessageDescriptor,
    ) -> tuple[NormalizedDescriptor, list[ValidationIssue]]:
        """Valida e normaliza o descritor.

        Args:
            descriptor: Descritor simplificado

        Returns:
            Tupla (descritor normalizado, problemas em ordem de entrada)
        """
        issues: list[ValidationIssue] = []
        if not descriptor.elements:
            issues.append(
                ValidationIssue(
                    code=IssueCode.NO_ELEMENTS,
                    message="no elements supplied",
                )
            )

        elements, element_issues = self.validate_elements(descriptor.elements)
        issues.extend(element_issues)

        normalized = NormalizedDescriptor(
            text=descriptor.text,
            footer=descriptor.footer,
            header=descriptor.header,
            elements=elements,
            notes=self._collect_notes(elements),
        )
        logger.debug(
            "interactive_validation_completed",
            extra={
                "element_count": len(descriptor.elements),
                "error_count": len(issues),
            },
        )
        return normalized, issues

    def validate_elements(
        self,
        raw_elements: list[Any],
        *,
        allow_legacy: bool = True,
    ) -> tuple[list[NormalizedElement], list[ValidationIssue]]:
        """Valida uma sequência de elementos sem exigir que seja não vazia.

        Com allow_legacy=False a forma abreviada {id, text} é rejeitada.
        """
        issues: list[ValidationIssue] = []
        elements: list[NormalizedElement] = []
        for position, raw in enumerate(raw_elements):
            element = self._validate_element(raw, position, issues, allow_legacy)
            if element is not None:
                elements.append(element)
        return elements, issues

    def _validate_element(
        self,
        raw: Any,
        position: int,
        issues: list[ValidationIssue],
        allow_legacy: bool = True,
    ) -> NormalizedElement | None:
        if not isinstance(raw, dict):
            issues.append(
                ValidationIssue(
                    code=IssueCode.INVALID_ELEMENT,
                    message="element must be an object",
                    position=position,
                )
            )
            return None

        if _is_legacy_shape(raw):
            if allow_legacy:
                return self._validate_legacy(raw, position, issues)
            issues.append(
                ValidationIssue(
                    code=IssueCode.INVALID_ELEMENT,
                    message="shorthand button not allowed here; use name and buttonParamsJson",
                    position=position,
                    field="name",
                )
            )
            return None

        kind_key, kind = _first_present(raw, "kind", "name")
        rule = requirements_for(kind)
        if rule is None:
            label = "" if kind is None else str(kind)
            issues.append(
                ValidationIssue(
                    code=IssueCode.UNKNOWN_KIND,
                    message=f"unknown button type '{label}'",
                    position=position,
                    kind=label or None,
                    field=kind_key or ("kind" if "kind" in raw else "name"),
                )
            )
            return None

        return self._validate_structured(raw, rule, position, issues)

    def _validate_legacy(
        self,
        raw: dict[str, Any],
        position: int,
        issues: list[ValidationIssue],
    ) -> LegacyButton | None:
        """Valida forma {id, text} ou {buttonId, buttonText: {displayText}}."""
        ident = raw.get("id", raw.get("buttonId"))
        text = _legacy_text(raw)
        before = len(issues)
        for field, value in (("id", ident), ("text", text)):
            if not _non_empty_str(value):
                issues.append(
                    ValidationIssue(
                        code=IssueCode.MISSING_FIELD,
                        message=f"legacy button requires a non-empty '{field}'",
                        position=position,
                        kind=ElementKind.QUICK_REPLY.value,
                        field=field,
                    )
                )
        if len(issues) > before:
            return None
        return LegacyButton(id=ident, text=text)

    def _validate_structured(
        self,
        raw: dict[str, Any],
        rule: KindRule,
        position: int,
        issues: list[ValidationIssue],
    ) -> InteractiveElement | None:
        parameters = self._parse_parameters(raw, rule, position, issues)
        if parameters is None:
            return None

        before = len(issues)
        missing = [name for name in rule.required if is_blank(parameters.get(name))]
        for name in missing:
            issues.append(
                ValidationIssue(
                    code=IssueCode.MISSING_FIELD,
                    message=f"missing required field '{name}'",
                    position=position,
                    kind=rule.kind.value,
                    field=name,
                )
            )

        if rule.structure == SECTIONS_STRUCTURE and SECTIONS_STRUCTURE not in missing:
            issues.extend(check_sections(parameters, position))

        if len(issues) > before:
            return None
        return InteractiveElement(kind=rule.kind, parameters=parameters)

    @staticmethod
    def _parse_parameters(
        raw: dict[str, Any],
        rule: KindRule,
        position: int,
        issues: list[ValidationIssue],
    ) -> dict[str, Any] | None:
        """Desserializa `parameters`; None se o payload for inválido."""
        _, value = _first_present(raw, "parameters", "buttonParamsJson")
        if value is None:
            return {}

        if isinstance(value, str):
            try:
                value = json.loads(value)
            except (json.JSONDecodeError, RecursionError) as exc:
                issues.append(
                    ValidationIssue(
                        code=IssueCode.INVALID_PARAMETERS,
                        message=f"invalid parameters payload: {_parse_error_message(exc)}",
                        position=position,
                        kind=rule.kind.value,
                        field="parameters",
                    )
                )
                return None

        if not isinstance(value, dict):
            issues.append(
                ValidationIssue(
                    code=IssueCode.INVALID_PARAMETERS,
                    message="invalid parameters payload: expected a JSON object",
                    position=position,
                    kind=rule.kind.value,
                    field="parameters",
                )
            )
            return None

        return dict(value)

    def _collect_notes(self, elements: list[NormalizedElement]) -> list[str]:
        """Avisos não bloqueantes sobre limites de renderização."""
        notes: list[str] = []
        quick_replies = sum(
            1
            for element in elements
            if isinstance(element, LegacyButton)
            or element.kind == ElementKind.QUICK_REPLY
        )
        if quick_replies > self._settings.max_quick_replies:
            notes.append(
                f"{quick_replies} quick replies exceed the recommended "
                f"{self._settings.max_quick_replies}; some clients may not render them"
            )
        if len(elements) > self._settings.max_elements:
            notes.append(
                f"{len(elements)} elements exceed the recommended "
                f"{self._settings.max_elements}"
            )

        for note in notes:
            logger.warning("interactive_validation_note", extra={"note": note})
        return notes


def validate_interactive_message(
    descriptor: MessageDescriptor,
) -> tuple[NormalizedDescriptor, list[ValidationIssue]]:
    """Atalho funcional para InteractiveMessageValidator().validate()."""
    return InteractiveMessageValidator().validate(descriptor)
