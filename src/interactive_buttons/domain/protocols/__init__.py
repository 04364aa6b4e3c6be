"""Re-exports dos Protocolos de domínio."""

from __future__ import annotations

from interactive_buttons.domain.protocols.transport import MessageTransport

__all__ = [
    "MessageTransport",
]
