"""Validação e montagem de mensagens interativas para o transporte WhatsApp.

Uso típico:
    from interactive_buttons import send_buttons

    await send_buttons(
        transport,
        "5511999999999@s.whatsapp.net",
        {"text": "Escolha", "buttons": [{"id": "menu", "text": "Menu"}]},
    )
"""

from interactive_buttons.adapters.whatsapp.annotations import BinaryNode
from interactive_buttons.adapters.whatsapp.outbound import (
    InteractiveMessageSender,
    send_buttons,
    send_interactive_message,
)
from interactive_buttons.adapters.whatsapp.validators import (
    InteractiveValidationError,
    ValidationIssue,
)
from interactive_buttons.domain.enums import ElementKind
from interactive_buttons.domain.models import (
    InteractiveElement,
    LegacyButton,
    ListRow,
    ListSection,
    MessageDescriptor,
    MessageHeader,
    RawEnvelope,
    SimpleButtonsPayload,
)
from interactive_buttons.domain.protocols import MessageTransport
from interactive_buttons.observability.logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    "BinaryNode",
    "ElementKind",
    "InteractiveElement",
    "InteractiveMessageSender",
    "InteractiveValidationError",
    "LegacyButton",
    "ListRow",
    "ListSection",
    "MessageDescriptor",
    "MessageHeader",
    "MessageTransport",
    "RawEnvelope",
    "SimpleButtonsPayload",
    "ValidationIssue",
    "configure_logging",
    "send_buttons",
    "send_interactive_message",
]
