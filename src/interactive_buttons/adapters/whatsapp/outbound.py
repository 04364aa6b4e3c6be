"""Dispatcher de mensagens interativas sobre o transporte WhatsApp.

Responsabilidade:
- Orquestrar validação, construção de payload e anotações binárias
- Abortar antes de qualquer interação com o transporte se houver erro
- Delegar o envio ao transporte e devolver o resultado sem alterações
- Evitar exposição de destinatário e conteúdo em logs (PII)

Pipeline por chamada: normalizar -> validar -> montar -> anotar -> transmitir.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from interactive_buttons.adapters.whatsapp.annotations import (
    build_additional_nodes,
    classify,
)
from interactive_buttons.adapters.whatsapp.payload_builders.envelope import (
    RawEnvelopePayloadBuilder,
    has_prebuilt_content,
    native_flow_buttons,
)
from interactive_buttons.adapters.whatsapp.payload_builders.interactive import (
    InteractivePayloadBuilder,
    to_native_button,
)
from interactive_buttons.adapters.whatsapp.validators import (
    InteractiveMessageValidator,
    InteractiveValidationError,
    ValidationIssue,
)
from interactive_buttons.config.settings import Settings, get_settings
from interactive_buttons.domain.enums import IssueCode
from interactive_buttons.domain.models import (
    MessageDescriptor,
    RawEnvelope,
    SimpleButtonsPayload,
)
from interactive_buttons.domain.protocols.transport import MessageTransport
from interactive_buttons.observability.context import correlation_scope
from interactive_buttons.observability.logging import get_logger

logger: logging.Logger = get_logger(__name__)

InteractiveContent = MessageDescriptor | RawEnvelope


def _raise_if_invalid(issues: list[ValidationIssue]) -> None:
    if not issues:
        return
    logger.warning(
        "interactive_validation_failed",
        extra={
            "error_count": len(issues),
            "error_codes": sorted({issue.code.value for issue in issues}),
        },
    )
    raise InteractiveValidationError(issues)


class InteractiveMessageSender:
    """Envia mensagens interativas via um MessageTransport.

    Não mantém estado mutável entre envios: chamadas concorrentes no
    mesmo processo são independentes.
    """

    def __init__(
        self,
        transport: MessageTransport,
        *,
        settings: Settings | None = None,
    ) -> None:
        """Inicializa o dispatcher.

        Args:
            transport: Implementação concreta do cliente de transporte
            settings: Configurações (default: get_settings())
        """
        self.transport = transport
        self.settings = settings or get_settings()
        self.validator = InteractiveMessageValidator(self.settings)
        self.builder = InteractivePayloadBuilder()
        self.raw_builder = RawEnvelopePayloadBuilder()

    async def send(self, recipient: str, content: InteractiveContent) -> Any:
        """Valida, monta, anota e transmite uma mensagem interativa.

        Args:
            recipient: JID do destinatário
            content: MessageDescriptor (forma simplificada) ou RawEnvelope

        Returns:
            Resultado de relay_message, sem alterações

        Raises:
            InteractiveValidationError: Se a mensagem for inválida
            TypeError: Se content não for um dos tipos aceitos
        """
        with correlation_scope():
            payload = self.prepare(content)
            nodes = build_additional_nodes(payload, recipient, self.settings)

            message = await self.transport.generate_message(recipient, payload)
            result = await self.transport.relay_message(recipient, message, nodes)

            logger.info(
                "interactive_message_relayed",
                extra={
                    "message_kind": classify(payload).value,
                    "additional_nodes": [node.tag for node in nodes],
                },
            )
            return result

    async def send_buttons(
        self,
        recipient: str,
        payload: SimpleButtonsPayload | dict[str, Any],
    ) -> Any:
        """Atalho para o formato {text, footer, buttons: [{id, text}, ...]}."""
        if not isinstance(payload, SimpleButtonsPayload):
            try:
                payload = SimpleButtonsPayload.model_validate(payload)
            except PydanticValidationError as exc:
                issue = ValidationIssue(
                    code=IssueCode.INVALID_PAYLOAD,
                    message=f"invalid buttons payload ({exc.error_count()} error(s))",
                )
                raise InteractiveValidationError([issue]) from exc
        return await self.send(recipient, payload.to_descriptor())

    def prepare(self, content: InteractiveContent) -> dict[str, Any]:
        """Valida e monta o conteúdo sem tocar no transporte."""
        if isinstance(content, MessageDescriptor):
            return self._prepare_descriptor(content)
        if isinstance(content, RawEnvelope):
            return self._prepare_raw(content)
        raise TypeError(
            "content must be MessageDescriptor or RawEnvelope, "
            f"got {type(content).__name__}"
        )

    def _prepare_descriptor(self, descriptor: MessageDescriptor) -> dict[str, Any]:
        normalized, issues = self.validator.validate(descriptor)
        _raise_if_invalid(issues)
        return self.builder.build(normalized)

    def _prepare_raw(self, envelope: RawEnvelope) -> dict[str, Any]:
        raw_buttons = native_flow_buttons(envelope)
        if not raw_buttons:
            if not has_prebuilt_content(envelope):
                _raise_if_invalid(
                    [
                        ValidationIssue(
                            code=IssueCode.NO_ELEMENTS,
                            message="raw envelope has no buttons and no interactive content",
                        )
                    ]
                )
            # Envelope já completo pelo chamador; nada a revalidar
            logger.debug("raw_envelope_validation_skipped")
            return self.raw_builder.build(envelope)

        elements, issues = self.validator.validate_elements(
            raw_buttons,
            allow_legacy=False,
        )
        _raise_if_invalid(issues)
        buttons = [to_native_button(element) for element in elements]
        return self.raw_builder.build(envelope, buttons)


async def send_interactive_message(
    transport: MessageTransport,
    recipient: str,
    content: InteractiveContent,
    *,
    settings: Settings | None = None,
) -> Any:
    """Envia MessageDescriptor ou RawEnvelope pelo transporte."""
    sender = InteractiveMessageSender(transport, settings=settings)
    return await sender.send(recipient, content)


async def send_buttons(
    transport: MessageTransport,
    recipient: str,
    payload: SimpleButtonsPayload | dict[str, Any],
    *,
    settings: Settings | None = None,
) -> Any:
    """Envia mensagem simples de botões de resposta rápida."""
    sender = InteractiveMessageSender(transport, settings=settings)
    return await sender.send_buttons(recipient, payload)
