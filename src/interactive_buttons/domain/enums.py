"""Enums de domínio para elementos interativos e mensagens native flow."""

from __future__ import annotations

from enum import StrEnum


class ElementKind(StrEnum):
    """Tipos de elemento interativo aceitos no nativeFlowMessage.

    Conjunto fechado: qualquer valor fora daqui é tratado como tipo
    desconhecido pelo validador, nunca aceito em silêncio.
    """

    QUICK_REPLY = "quick_reply"
    CTA_URL = "cta_url"
    CTA_COPY = "cta_copy"
    CTA_CALL = "cta_call"
    SINGLE_SELECT = "single_select"
    ADDRESS_MESSAGE = "address_message"
    SEND_LOCATION = "send_location"
    MPM = "mpm"


class MessageKind(StrEnum):
    """Classificação da mensagem para escolha dos nós binários."""

    LIST = "list"
    BUTTONS = "buttons"
    NATIVE_FLOW = "native_flow"
    GENERIC = "generic"


class IssueCode(StrEnum):
    """Códigos estáveis dos problemas de validação."""

    NO_ELEMENTS = "no_elements"
    INVALID_ELEMENT = "invalid_element"
    UNKNOWN_KIND = "unknown_kind"
    INVALID_PARAMETERS = "invalid_parameters"
    MISSING_FIELD = "missing_field"
    INVALID_STRUCTURE = "invalid_structure"
    INVALID_PAYLOAD = "invalid_payload"
