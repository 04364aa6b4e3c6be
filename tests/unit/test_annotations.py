"""Testes para a classificação e os nós binários auxiliares."""

from __future__ import annotations

from interactive_buttons.adapters.whatsapp.annotations import (
    BinaryNode,
    build_additional_nodes,
    build_biz_node,
    classify,
    is_private_chat,
)
from interactive_buttons.config.settings import Settings
from interactive_buttons.domain.enums import MessageKind


def _native_flow(*names: str) -> dict:
    return {
        "interactiveMessage": {
            "nativeFlowMessage": {
                "buttons": [{"name": name, "buttonParamsJson": "{}"} for name in names]
            }
        }
    }


class TestClassify:
    def test_native_flow(self) -> None:
        assert classify(_native_flow("quick_reply")) == MessageKind.NATIVE_FLOW

    def test_buttons_message(self) -> None:
        assert classify({"buttonsMessage": {}}) == MessageKind.BUTTONS

    def test_list_message(self) -> None:
        assert classify({"listMessage": {}}) == MessageKind.LIST

    def test_generic(self) -> None:
        assert classify({"conversation": "oi"}) == MessageKind.GENERIC


class TestBizNode:
    """Tabela de decisão do nó biz."""

    def test_mixed_native_flow(self) -> None:
        """Botões comuns usam native_flow v9 name=mixed."""
        node = build_biz_node(_native_flow("quick_reply", "cta_url"))

        assert node.to_dict() == {
            "tag": "biz",
            "attrs": {},
            "content": [
                {
                    "tag": "interactive",
                    "attrs": {"type": "native_flow", "v": "1"},
                    "content": [
                        {"tag": "native_flow", "attrs": {"v": "9", "name": "mixed"}}
                    ],
                }
            ],
        }

    def test_special_first_button(self) -> None:
        """mpm/send_location no primeiro botão usam v2 com o próprio nome."""
        node = build_biz_node(_native_flow("send_location", "quick_reply"))
        native_flow = node.content[0].content[0]

        assert native_flow.attrs == {"v": "2", "name": "send_location"}

    def test_payment_first_button(self) -> None:
        """review_and_pay vira native_flow_name=order_details."""
        node = build_biz_node(_native_flow("review_and_pay"))

        assert node == BinaryNode(tag="biz", attrs={"native_flow_name": "order_details"})

    def test_list_message(self) -> None:
        node = build_biz_node({"listMessage": {}})

        assert node.content == (BinaryNode(tag="list", attrs={"type": "product_list", "v": "2"}),)

    def test_generic_message(self) -> None:
        node = build_biz_node({"conversation": "oi"})

        assert node.to_dict() == {"tag": "biz", "attrs": {}}

    def test_empty_native_flow_is_mixed(self) -> None:
        node = build_biz_node({"interactiveMessage": {"nativeFlowMessage": {}}})

        assert node.content[0].content[0].attrs["name"] == "mixed"


class TestAdditionalNodes:
    def test_private_chat_gets_bot_node(self) -> None:
        """Destinatário 1:1 recebe nó bot biz_bot=1."""
        nodes = build_additional_nodes(
            _native_flow("quick_reply"), "5511999999999@s.whatsapp.net", Settings()
        )

        assert [node.tag for node in nodes] == ["biz", "bot"]
        assert nodes[1].attrs == {"biz_bot": "1"}

    def test_group_chat_has_no_bot_node(self) -> None:
        nodes = build_additional_nodes(
            _native_flow("quick_reply"), "120363000000000000@g.us", Settings()
        )

        assert [node.tag for node in nodes] == ["biz"]

    def test_bot_node_can_be_disabled(self) -> None:
        nodes = build_additional_nodes(
            _native_flow("quick_reply"),
            "5511999999999@s.whatsapp.net",
            Settings(attach_bot_node=False),
        )

        assert [node.tag for node in nodes] == ["biz"]

    def test_is_private_chat_uses_settings_suffix(self, monkeypatch) -> None:
        monkeypatch.setenv("INTERACTIVE_PRIVATE_CHAT_SUFFIX", "@c.us")

        assert is_private_chat("5511999999999@c.us")
        assert not is_private_chat("5511999999999@s.whatsapp.net")
