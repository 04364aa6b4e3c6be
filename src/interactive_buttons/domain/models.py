"""Modelos de domínio para mensagens interativas (contratos de entrada e saída).

Responsabilidade:
- Descrever as formas aceitas na fronteira da API (descritor simplificado,
  envelope bruto, payload simples de botões)
- Descrever a forma normalizada entregue pelo validador ao builder

Os modelos de entrada são propositalmente permissivos nos elementos: a
validação de conteúdo é feita pelo validador, que agrega todos os problemas
em vez de falhar no primeiro.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from interactive_buttons.domain.enums import ElementKind


class ListRow(BaseModel):
    """Linha de uma seção de lista (single_select)."""

    id: str
    title: str
    header: str | None = None
    description: str | None = None


class ListSection(BaseModel):
    """Grupo nomeado de linhas."""

    title: str | None = None
    rows: list[ListRow] = Field(default_factory=list)


class MessageHeader(BaseModel):
    """Cabeçalho estruturado da mensagem interativa."""

    title: str | None = None
    subtitle: str | None = None
    has_media_attachment: bool = False


class InteractiveElement(BaseModel):
    """Elemento interativo (botão, lista ou ação).

    Aceita os nomes de wire do transporte (`name`, `buttonParamsJson`)
    além de `kind` e `parameters`.
    """

    model_config = ConfigDict(populate_by_name=True)

    kind: ElementKind = Field(validation_alias=AliasChoices("kind", "name"))
    parameters: dict[str, Any] | str = Field(
        default_factory=dict,
        validation_alias=AliasChoices("parameters", "buttonParamsJson"),
    )


class LegacyButton(BaseModel):
    """Forma abreviada `{id, text}` de um quick_reply."""

    id: str
    text: str


def _elements_as_mappings(value: Any) -> Any:
    """Converte modelos tipados em mapeamentos para o validador."""
    if not isinstance(value, list):
        return value
    return [
        item.model_dump() if isinstance(item, BaseModel) else item
        for item in value
    ]


class MessageDescriptor(BaseModel):
    """Descritor simplificado de mensagem interativa."""

    text: str | None = None
    footer: str | None = None
    header: MessageHeader | None = None
    elements: list[Any] = Field(default_factory=list)

    @field_validator("elements", mode="before")
    @classmethod
    def coerce_elements(cls, value: Any) -> Any:
        return _elements_as_mappings(value)


class RawEnvelope(BaseModel):
    """Envelope totalmente especificado (uso avançado).

    Campos extras (ex.: contextInfo) são repassados ao transporte.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    body: str | None = None
    footer: str | None = None
    header: dict[str, Any] | None = None
    interactive_message: dict[str, Any] = Field(
        default_factory=dict,
        alias="interactiveMessage",
    )


class SimpleButtonsPayload(BaseModel):
    """Payload simples `{text, footer, buttons}` usado por send_buttons."""

    text: str | None = None
    footer: str | None = None
    title: str | None = None
    subtitle: str | None = None
    buttons: list[Any] = Field(default_factory=list)

    def to_descriptor(self) -> MessageDescriptor:
        """Converte para o descritor geral."""
        header = None
        if self.title or self.subtitle:
            header = MessageHeader(title=self.title, subtitle=self.subtitle)
        return MessageDescriptor(
            text=self.text,
            footer=self.footer,
            header=header,
            elements=self.buttons,
        )


class NormalizedDescriptor(BaseModel):
    """Descritor validado: todos os `parameters` já são mapeamentos."""

    text: str | None = None
    footer: str | None = None
    header: MessageHeader | None = None
    elements: list[InteractiveElement | LegacyButton] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)
