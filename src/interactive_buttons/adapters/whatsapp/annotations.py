"""Nós binários auxiliares para renderização de mensagens interativas.

Responsabilidade:
- Classificar o conteúdo (lista, botões, native flow, genérico)
- Produzir os nós `biz` (e `bot` em chats privados) que o cliente
  receptor exige para habilitar elementos interativos

Esses nós são metadados do transporte, não conteúdo visível.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from interactive_buttons.config.settings import Settings, get_settings
from interactive_buttons.domain.enums import MessageKind

# Primeiro botão que pede nó native_flow com o próprio nome
NATIVE_FLOW_SPECIALS = frozenset(
    {
        "mpm",
        "cta_catalog",
        "send_location",
        "call_permission_request",
        "wa_payment_transaction_details",
        "automated_greeting_message_view_catalog",
    }
)

# Primeiro botão de pagamento -> native_flow_name no nó biz
PAYMENT_FLOW_NAMES = {
    "review_and_pay": "order_details",
    "payment_info": "payment_info",
}


@dataclass(frozen=True, slots=True)
class BinaryNode:
    """Nó binário do protocolo (tag, atributos, filhos)."""

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    content: tuple[BinaryNode, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        node: dict[str, Any] = {"tag": self.tag, "attrs": dict(self.attrs)}
        if self.content is not None:
            node["content"] = [child.to_dict() for child in self.content]
        return node


def _native_flow(content: dict[str, Any]) -> dict[str, Any] | None:
    interactive = content.get("interactiveMessage")
    if not isinstance(interactive, dict):
        return None
    native_flow = interactive.get("nativeFlowMessage")
    return native_flow if isinstance(native_flow, dict) else None


def _first_button_name(native_flow: dict[str, Any]) -> str | None:
    buttons = native_flow.get("buttons")
    if not isinstance(buttons, list) or not buttons:
        return None
    first = buttons[0]
    if not isinstance(first, dict):
        return None
    name = first.get("name")
    return name if isinstance(name, str) else None


def classify(content: dict[str, Any]) -> MessageKind:
    """Classifica o conteúdo para a tabela de anotações."""
    if _native_flow(content) is not None:
        return MessageKind.NATIVE_FLOW
    if "buttonsMessage" in content:
        return MessageKind.BUTTONS
    if "listMessage" in content:
        return MessageKind.LIST
    return MessageKind.GENERIC


def _interactive_node(version: str, name: str) -> BinaryNode:
    return BinaryNode(
        tag="biz",
        content=(
            BinaryNode(
                tag="interactive",
                attrs={"type": "native_flow", "v": "1"},
                content=(BinaryNode(tag="native_flow", attrs={"v": version, "name": name}),),
            ),
        ),
    )


def build_biz_node(content: dict[str, Any]) -> BinaryNode:
    """Nó `biz` conforme o tipo de mensagem e o primeiro botão."""
    kind = classify(content)

    if kind == MessageKind.NATIVE_FLOW:
        first_name = _first_button_name(_native_flow(content) or {})
        if first_name in PAYMENT_FLOW_NAMES:
            return BinaryNode(
                tag="biz",
                attrs={"native_flow_name": PAYMENT_FLOW_NAMES[first_name]},
            )
        if first_name in NATIVE_FLOW_SPECIALS:
            return _interactive_node("2", first_name)
        return _interactive_node("9", "mixed")

    if kind == MessageKind.BUTTONS:
        return _interactive_node("9", "mixed")

    if kind == MessageKind.LIST:
        return BinaryNode(
            tag="biz",
            content=(BinaryNode(tag="list", attrs={"type": "product_list", "v": "2"}),),
        )

    return BinaryNode(tag="biz")


def is_private_chat(recipient: str, settings: Settings | None = None) -> bool:
    """True para destinatários 1:1 (sufixo de JID de usuário)."""
    settings = settings or get_settings()
    return recipient.endswith(settings.private_chat_suffix)


def build_additional_nodes(
    content: dict[str, Any],
    recipient: str,
    settings: Settings | None = None,
) -> list[BinaryNode]:
    """Conjunto de nós binários a anexar ao envio.

    Args:
        content: Conteúdo final da mensagem
        recipient: JID do destinatário
        settings: Configurações (default: get_settings())

    Returns:
        Lista com o nó biz e, em chats privados, o nó bot
    """
    settings = settings or get_settings()
    nodes = [build_biz_node(content)]
    if settings.attach_bot_node and is_private_chat(recipient, settings):
        nodes.append(BinaryNode(tag="bot", attrs={"biz_bot": "1"}))
    return nodes
