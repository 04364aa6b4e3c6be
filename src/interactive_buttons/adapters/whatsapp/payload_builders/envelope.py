"""Montagem de envelopes brutos (uso avançado)."""

from __future__ import annotations

import copy
from typing import Any

from interactive_buttons.adapters.whatsapp.payload_builders.base import text_block
from interactive_buttons.domain.models import RawEnvelope


def native_flow_buttons(envelope: RawEnvelope) -> list[Any]:
    """Botões declarados em interactiveMessage.nativeFlowMessage (ou vazio)."""
    native_flow = envelope.interactive_message.get("nativeFlowMessage")
    if not isinstance(native_flow, dict):
        return []
    buttons = native_flow.get("buttons")
    return buttons if isinstance(buttons, list) else []


# Conteúdos legados que o chamador pode montar por conta própria
_PREBUILT_KEYS = frozenset({"buttonsMessage", "listMessage"})


def has_prebuilt_content(envelope: RawEnvelope) -> bool:
    """True se o envelope já traz conteúdo interativo além de botões."""
    native_flow = envelope.interactive_message.get("nativeFlowMessage")
    if isinstance(native_flow, dict) and native_flow.keys() - {"buttons"}:
        return True
    return bool(_PREBUILT_KEYS & (envelope.model_extra or {}).keys())


class RawEnvelopePayloadBuilder:
    """Builder que respeita o envelope informado pelo chamador.

    Não expande atalhos: apenas move body/footer/header do nível superior
    para dentro de interactiveMessage quando ainda não existem lá e, se
    fornecidos, substitui os botões pelos já revalidados.
    """

    def build(
        self,
        envelope: RawEnvelope,
        buttons: list[dict[str, str]] | None = None,
    ) -> dict[str, Any]:
        interactive_obj = copy.deepcopy(envelope.interactive_message)

        body = text_block(envelope.body)
        if body is not None:
            interactive_obj.setdefault("body", body)

        footer = text_block(envelope.footer)
        if footer is not None:
            interactive_obj.setdefault("footer", footer)

        if envelope.header is not None:
            interactive_obj.setdefault("header", copy.deepcopy(envelope.header))

        if buttons is not None:
            native_flow = dict(interactive_obj.get("nativeFlowMessage") or {})
            native_flow["buttons"] = buttons
            interactive_obj["nativeFlowMessage"] = native_flow

        content: dict[str, Any] = dict(envelope.model_extra or {})
        content["interactiveMessage"] = interactive_obj
        return content
