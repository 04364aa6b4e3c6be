"""Fixtures para testes do dispatcher WhatsApp."""

from __future__ import annotations

from typing import Any

import pytest

from interactive_buttons.adapters.whatsapp.annotations import BinaryNode
from interactive_buttons.domain.protocols.transport import MessageTransport

PRIVATE_JID = "5511999999999@s.whatsapp.net"
GROUP_JID = "120363000000000000@g.us"


class FakeTransport(MessageTransport):
    """Transporte em memória que registra as chamadas recebidas."""

    def __init__(self) -> None:
        self.generated: list[tuple[str, dict[str, Any]]] = []
        self.relayed: list[tuple[str, Any, list[BinaryNode]]] = []

    async def generate_message(self, recipient: str, content: dict[str, Any]) -> Any:
        self.generated.append((recipient, content))
        return {"key": {"id": f"MSG{len(self.generated)}"}, "message": content}

    async def relay_message(
        self,
        recipient: str,
        message: Any,
        additional_nodes: list[BinaryNode],
    ) -> Any:
        self.relayed.append((recipient, message, additional_nodes))
        return {"status": "relayed", "id": message["key"]["id"]}


class BrokenTransport(FakeTransport):
    """Transporte que falha no relay (erro de rede simulado)."""

    async def relay_message(
        self,
        recipient: str,
        message: Any,
        additional_nodes: list[BinaryNode],
    ) -> Any:
        raise ConnectionError("socket closed")


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def broken_transport() -> BrokenTransport:
    return BrokenTransport()
