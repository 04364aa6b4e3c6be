"""Tabela de regras por tipo de elemento interativo.

Mapeamento imutável tipo -> campos obrigatórios em `parameters`, mais a
indicação de checagem estrutural aninhada (ex.: seções de single_select).
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from interactive_buttons.domain.enums import ElementKind

# Estruturas aninhadas com checagem dedicada
SECTIONS_STRUCTURE = "sections"


@dataclass(frozen=True, slots=True)
class KindRule:
    """Requisitos de um tipo de elemento."""

    kind: ElementKind
    required: tuple[str, ...]
    structure: str | None = None


_RULES = MappingProxyType(
    {
        ElementKind.QUICK_REPLY: KindRule(
            ElementKind.QUICK_REPLY, ("display_text", "id")
        ),
        ElementKind.CTA_URL: KindRule(ElementKind.CTA_URL, ("display_text", "url")),
        ElementKind.CTA_COPY: KindRule(
            ElementKind.CTA_COPY, ("display_text", "copy_code")
        ),
        ElementKind.CTA_CALL: KindRule(
            ElementKind.CTA_CALL, ("display_text", "phone_number")
        ),
        ElementKind.SINGLE_SELECT: KindRule(
            ElementKind.SINGLE_SELECT,
            ("title", "sections"),
            structure=SECTIONS_STRUCTURE,
        ),
        ElementKind.ADDRESS_MESSAGE: KindRule(
            ElementKind.ADDRESS_MESSAGE, ("display_text",)
        ),
        ElementKind.SEND_LOCATION: KindRule(
            ElementKind.SEND_LOCATION, ("display_text",)
        ),
        ElementKind.MPM: KindRule(ElementKind.MPM, ("product_id",)),
    }
)

# Exemplos mostrados em InteractiveValidationError.format_detailed()
_EXAMPLES = MappingProxyType(
    {
        ElementKind.QUICK_REPLY: {"display_text": "Menu", "id": "menu"},
        ElementKind.CTA_URL: {"display_text": "Abrir site", "url": "https://example.com"},
        ElementKind.CTA_COPY: {"display_text": "Copiar código", "copy_code": "PROMO10"},
        ElementKind.CTA_CALL: {"display_text": "Ligar", "phone_number": "+5511999999999"},
        ElementKind.SINGLE_SELECT: {
            "title": "Escolha",
            "sections": [
                {"title": "Planos", "rows": [{"title": "Básico", "id": "plan_basic"}]}
            ],
        },
        ElementKind.ADDRESS_MESSAGE: {"display_text": "Informar endereço"},
        ElementKind.SEND_LOCATION: {"display_text": "Enviar localização"},
        ElementKind.MPM: {"product_id": "sku-123"},
    }
)

if set(_RULES) != set(ElementKind):  # pragma: no cover
    raise RuntimeError("rule table must cover every ElementKind")


def _resolve(kind: Any) -> ElementKind | None:
    try:
        return ElementKind(kind)
    except ValueError:
        return None


def requirements_for(kind: Any) -> KindRule | None:
    """Retorna a regra do tipo ou None se o tipo for desconhecido.

    None é um resultado distinto de "sem requisitos": o validador deve
    tratá-lo como erro.
    """
    resolved = _resolve(kind)
    if resolved is None:
        return None
    return _RULES[resolved]


def example_for(kind: Any) -> dict[str, Any] | None:
    """Exemplo de `parameters` válidos para o tipo (ou None)."""
    resolved = _resolve(kind)
    if resolved is None:
        return None
    return copy.deepcopy(_EXAMPLES[resolved])


def supported_kinds() -> tuple[str, ...]:
    """Tipos suportados, na ordem da enumeração."""
    return tuple(kind.value for kind in ElementKind)
