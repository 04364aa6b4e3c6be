"""Testes para builders de payload interativo.

Cobertura:
- Conversão de LegacyButton em quick_reply
- Envelope body/footer/header sem campos vazios
- Re-serialização de parameters em buttonParamsJson
- Round-trip de single_select (validar -> montar)
- Envelope bruto (RawEnvelopePayloadBuilder)
"""

from __future__ import annotations

import json

import pytest

from interactive_buttons.adapters.whatsapp.payload_builders import (
    InteractivePayloadBuilder,
    RawEnvelopePayloadBuilder,
    build_single_select,
    legacy_to_element,
    serialize_parameters,
)
from interactive_buttons.adapters.whatsapp.validators import (
    InteractiveMessageValidator,
    PayloadBuildError,
)
from interactive_buttons.config.settings import Settings
from interactive_buttons.domain.enums import ElementKind
from interactive_buttons.domain.models import (
    InteractiveElement,
    LegacyButton,
    ListRow,
    ListSection,
    MessageDescriptor,
    MessageHeader,
    NormalizedDescriptor,
    RawEnvelope,
)


class TestLegacyConversion:
    """Testes para legacy_to_element."""

    def test_legacy_button_becomes_quick_reply(self) -> None:
        """{id: x, text: Menu} vira quick_reply com display_text e id."""
        element = legacy_to_element(LegacyButton(id="x", text="Menu"))

        assert element.kind == ElementKind.QUICK_REPLY
        assert element.parameters == {"display_text": "Menu", "id": "x"}


class TestInteractivePayloadBuilder:
    """Testes para o envelope interactiveMessage."""

    def test_builds_full_envelope(self) -> None:
        """Body, footer e header presentes quando informados."""
        descriptor = NormalizedDescriptor(
            text="Escolha uma opção",
            footer="Pyloto",
            header=MessageHeader(title="Menu", subtitle="Principal"),
            elements=[LegacyButton(id="a", text="A")],
        )

        payload = InteractivePayloadBuilder().build(descriptor)
        interactive = payload["interactiveMessage"]

        assert interactive["body"] == {"text": "Escolha uma opção"}
        assert interactive["footer"] == {"text": "Pyloto"}
        assert interactive["header"] == {
            "title": "Menu",
            "subtitle": "Principal",
            "hasMediaAttachment": False,
        }
        assert interactive["nativeFlowMessage"]["buttons"] == [
            {"name": "quick_reply", "buttonParamsJson": '{"display_text": "A", "id": "a"}'}
        ]

    def test_omitted_fields_are_absent(self) -> None:
        """Sem text/footer/header, as chaves não aparecem."""
        descriptor = NormalizedDescriptor(elements=[LegacyButton(id="a", text="A")])

        interactive = InteractivePayloadBuilder().build(descriptor)["interactiveMessage"]

        assert set(interactive) == {"nativeFlowMessage"}

    def test_header_omits_missing_subtitle(self) -> None:
        """Header só com título não ganha subtitle vazio."""
        descriptor = NormalizedDescriptor(
            header=MessageHeader(title="Menu"),
            elements=[LegacyButton(id="a", text="A")],
        )

        header = InteractivePayloadBuilder().build(descriptor)["interactiveMessage"]["header"]

        assert "subtitle" not in header
        assert header["title"] == "Menu"

    def test_empty_header_is_dropped(self) -> None:
        """Header sem título, subtítulo ou mídia é omitido."""
        descriptor = NormalizedDescriptor(
            header=MessageHeader(),
            elements=[LegacyButton(id="a", text="A")],
        )

        interactive = InteractivePayloadBuilder().build(descriptor)["interactiveMessage"]

        assert "header" not in interactive

    def test_element_order_is_preserved(self) -> None:
        """Botões saem na ordem dos elementos."""
        descriptor = NormalizedDescriptor(
            elements=[
                InteractiveElement(
                    kind=ElementKind.CTA_URL,
                    parameters={"display_text": "Site", "url": "https://example.com"},
                ),
                LegacyButton(id="b", text="B"),
            ]
        )

        buttons = InteractivePayloadBuilder().build(descriptor)["interactiveMessage"][
            "nativeFlowMessage"
        ]["buttons"]

        assert [button["name"] for button in buttons] == ["cta_url", "quick_reply"]

    def test_non_ascii_is_kept(self) -> None:
        """Acentos não são escapados no JSON serializado."""
        assert serialize_parameters({"display_text": "Não"}) == '{"display_text": "Não"}'

    def test_unserializable_parameters_raise_build_error(self) -> None:
        """Falha de serialização é defeito interno (PayloadBuildError)."""
        with pytest.raises(PayloadBuildError):
            serialize_parameters({"display_text": object()})

    def test_unparsed_string_parameters_raise_build_error(self) -> None:
        """Elemento com parameters ainda em string não é montado."""
        descriptor = NormalizedDescriptor(
            elements=[
                InteractiveElement(
                    kind=ElementKind.QUICK_REPLY,
                    parameters='{"display_text": "Ok", "id": "ok"}',
                )
            ]
        )

        with pytest.raises(PayloadBuildError, match="must be validated before build"):
            InteractivePayloadBuilder().build(descriptor)


class TestSingleSelectRoundTrip:
    """validar -> montar reproduz seções e linhas."""

    def test_round_trip_preserves_sections(self) -> None:
        """N seções com M linhas voltam com o mesmo conteúdo."""
        sections = [
            ListSection(
                title=f"Seção {s}",
                rows=[
                    ListRow(id=f"r{s}{r}", title=f"Item {r}", description="detalhe")
                    for r in range(3)
                ],
            )
            for s in range(2)
        ]
        element = build_single_select("Catálogo", sections)
        descriptor = MessageDescriptor(text="Veja", elements=[element])

        normalized, issues = InteractiveMessageValidator(Settings()).validate(descriptor)
        payload = InteractivePayloadBuilder().build(normalized)

        assert issues == []
        button = payload["interactiveMessage"]["nativeFlowMessage"]["buttons"][0]
        assert button["name"] == "single_select"
        params = json.loads(button["buttonParamsJson"])
        assert params["title"] == "Catálogo"
        assert params["sections"] == [section.model_dump(exclude_none=True) for section in sections]

    def test_build_single_select_omits_unset_optionals(self) -> None:
        """header/description não informados ficam ausentes."""
        element = build_single_select(
            "Escolha", [ListSection(rows=[ListRow(id="1", title="Um")])]
        )

        assert element.parameters["sections"] == [{"rows": [{"id": "1", "title": "Um"}]}]


class TestRawEnvelopePayloadBuilder:
    """Envelope bruto respeita o que o chamador especificou."""

    def test_top_level_fields_are_moved_inside(self) -> None:
        """body/footer/header do nível superior entram em interactiveMessage."""
        envelope = RawEnvelope(
            body="Corpo",
            footer="Rodapé",
            header={"title": "T", "hasMediaAttachment": False},
            interactiveMessage={"nativeFlowMessage": {"messageParamsJson": "{}"}},
        )

        content = RawEnvelopePayloadBuilder().build(envelope)
        interactive = content["interactiveMessage"]

        assert interactive["body"] == {"text": "Corpo"}
        assert interactive["footer"] == {"text": "Rodapé"}
        assert interactive["header"]["title"] == "T"
        assert interactive["nativeFlowMessage"] == {"messageParamsJson": "{}"}

    def test_inner_fields_take_precedence(self) -> None:
        """Campos já presentes em interactiveMessage não são sobrescritos."""
        envelope = RawEnvelope(
            body="Fora",
            interactiveMessage={"body": {"text": "Dentro"}},
        )

        content = RawEnvelopePayloadBuilder().build(envelope)

        assert content["interactiveMessage"]["body"] == {"text": "Dentro"}

    def test_extra_fields_are_passed_through(self) -> None:
        """Campos extras do envelope seguem para o transporte."""
        envelope = RawEnvelope.model_validate(
            {"interactiveMessage": {}, "contextInfo": {"isForwarded": True}}
        )

        content = RawEnvelopePayloadBuilder().build(envelope)

        assert content["contextInfo"] == {"isForwarded": True}

    def test_replaces_buttons_when_given(self) -> None:
        """Botões revalidados substituem os originais."""
        envelope = RawEnvelope(
            interactiveMessage={
                "nativeFlowMessage": {"buttons": [{"name": "x"}], "messageVersion": 1}
            }
        )
        buttons = [{"name": "quick_reply", "buttonParamsJson": "{}"}]

        content = RawEnvelopePayloadBuilder().build(envelope, buttons)
        native_flow = content["interactiveMessage"]["nativeFlowMessage"]

        assert native_flow["buttons"] == buttons
        assert native_flow["messageVersion"] == 1
        assert envelope.interactive_message["nativeFlowMessage"]["buttons"] == [{"name": "x"}]
