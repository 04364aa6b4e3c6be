"""Configurações centralizadas do interactive_buttons.

Uso típico:
    from interactive_buttons.config import get_settings
"""

from interactive_buttons.config.settings import (
    PRIVATE_CHAT_SUFFIX,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "PRIVATE_CHAT_SUFFIX",
]
