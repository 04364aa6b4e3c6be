"""Interfaces e utilidades base para builders de payload."""

from __future__ import annotations

import json
from typing import Any, Protocol

from interactive_buttons.adapters.whatsapp.validators.errors import PayloadBuildError
from interactive_buttons.domain.models import NormalizedDescriptor


class PayloadBuilder(Protocol):
    """Protocolo para builders de payload de transporte."""

    def build(self, descriptor: NormalizedDescriptor) -> dict[str, Any]:
        """Constrói o conteúdo esperado pelo transporte.

        Args:
            descriptor: Descritor já validado

        Returns:
            Conteúdo pronto para generate_message
        """
        ...


def serialize_parameters(parameters: dict[str, Any]) -> str:
    """Serializa `parameters` para buttonParamsJson.

    Preserva a ordem de inserção das chaves; não reordena.

    Raises:
        PayloadBuildError: Se o conteúdo não for serializável
    """
    try:
        return json.dumps(parameters, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise PayloadBuildError(f"parameters not serializable: {exc}") from exc


def text_block(value: str | None) -> dict[str, str] | None:
    """Bloco {"text": ...} ou None quando o texto não foi informado."""
    if value is None:
        return None
    return {"text": value}
