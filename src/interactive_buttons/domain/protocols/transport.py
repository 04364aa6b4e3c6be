"""Protocolo de domínio para o cliente de transporte WhatsApp.

Interface leve (ABC) da qual o dispatcher depende. Sessão, criptografia e
I/O de rede ficam inteiramente do lado da implementação.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from interactive_buttons.adapters.whatsapp.annotations import BinaryNode


class MessageTransport(ABC):
    """Contrato mínimo consumido pelo dispatcher.

    Métodos:
    - generate_message(recipient, content) -> mensagem do transporte
    - relay_message(recipient, message, additional_nodes) -> resultado do envio
    """

    @abstractmethod
    async def generate_message(self, recipient: str, content: dict[str, Any]) -> Any:
        """Constrói a mensagem do transporte a partir do conteúdo.

        Args:
            recipient: JID do destinatário
            content: Conteúdo já validado e montado

        Returns:
            Mensagem no formato do transporte (opaca para esta camada)
        """

    @abstractmethod
    async def relay_message(
        self,
        recipient: str,
        message: Any,
        additional_nodes: list[BinaryNode],
    ) -> Any:
        """Transmite a mensagem com os nós binários auxiliares.

        Erros de transporte devem ser propagados ao chamador.
        """
