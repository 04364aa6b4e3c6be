"""Builders de payload para o transporte WhatsApp.

Recebem descritores já validados e produzem o conteúdo interativo
(interactiveMessage/nativeFlowMessage) esperado pelo transporte.
"""

from interactive_buttons.adapters.whatsapp.payload_builders.base import (
    PayloadBuilder,
    serialize_parameters,
)
from interactive_buttons.adapters.whatsapp.payload_builders.envelope import (
    RawEnvelopePayloadBuilder,
)
from interactive_buttons.adapters.whatsapp.payload_builders.interactive import (
    InteractivePayloadBuilder,
    build_single_select,
    legacy_to_element,
)

__all__ = [
    "InteractivePayloadBuilder",
    "PayloadBuilder",
    "RawEnvelopePayloadBuilder",
    "build_single_select",
    "legacy_to_element",
    "serialize_parameters",
]
