"""Builder para mensagens interativas native flow (botões, lista, CTA)."""

from __future__ import annotations

from typing import Any

from interactive_buttons.adapters.whatsapp.payload_builders.base import (
    serialize_parameters,
    text_block,
)
from interactive_buttons.adapters.whatsapp.validators.errors import PayloadBuildError
from interactive_buttons.domain.enums import ElementKind
from interactive_buttons.domain.models import (
    InteractiveElement,
    LegacyButton,
    ListSection,
    MessageHeader,
    NormalizedDescriptor,
)


def legacy_to_element(button: LegacyButton) -> InteractiveElement:
    """Converte a forma {id, text} em quick_reply canônico."""
    return InteractiveElement(
        kind=ElementKind.QUICK_REPLY,
        parameters={"display_text": button.text, "id": button.id},
    )


def build_single_select(title: str, sections: list[ListSection]) -> InteractiveElement:
    """Monta um single_select a partir de seções tipadas.

    Campos opcionais não informados (header, description) ficam ausentes.
    """
    return InteractiveElement(
        kind=ElementKind.SINGLE_SELECT,
        parameters={
            "title": title,
            "sections": [section.model_dump(exclude_none=True) for section in sections],
        },
    )


def to_native_button(element: InteractiveElement | LegacyButton) -> dict[str, str]:
    """Converte um elemento normalizado em botão do nativeFlowMessage."""
    if isinstance(element, LegacyButton):
        element = legacy_to_element(element)
    if isinstance(element.parameters, str):
        raise PayloadBuildError(
            f"parameters of {element.kind.value} must be validated before build"
        )
    serialized = serialize_parameters(element.parameters)
    return {"name": element.kind.value, "buttonParamsJson": serialized}


def build_header(header: MessageHeader | None) -> dict[str, Any] | None:
    """Monta o header omitindo campos não informados."""
    if header is None:
        return None
    header_obj: dict[str, Any] = {}
    if header.title is not None:
        header_obj["title"] = header.title
    if header.subtitle is not None:
        header_obj["subtitle"] = header.subtitle
    if not header_obj and not header.has_media_attachment:
        return None
    header_obj["hasMediaAttachment"] = header.has_media_attachment
    return header_obj


class InteractivePayloadBuilder:
    """Builder do envelope interactiveMessage/nativeFlowMessage."""

    def build(self, descriptor: NormalizedDescriptor) -> dict[str, Any]:
        """Constrói o conteúdo interativo.

        Args:
            descriptor: Descritor validado pelo InteractiveMessageValidator

        Returns:
            {"interactiveMessage": {...}} conforme o transporte

        Raises:
            PayloadBuildError: Se algum elemento não puder ser serializado
        """
        interactive_obj: dict[str, Any] = {}

        body = text_block(descriptor.text)
        if body is not None:
            interactive_obj["body"] = body

        footer = text_block(descriptor.footer)
        if footer is not None:
            interactive_obj["footer"] = footer

        header = build_header(descriptor.header)
        if header is not None:
            interactive_obj["header"] = header

        interactive_obj["nativeFlowMessage"] = {
            "buttons": [to_native_button(element) for element in descriptor.elements],
        }
        return {"interactiveMessage": interactive_obj}
