"""Configurações da biblioteca via variáveis de ambiente.

Nenhuma configuração aqui é secreta: a camada não abre conexões nem
autentica. Valores controlam logs, limites de aviso e anotações binárias.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# Sufixo de JID para conversas 1:1 no transporte WhatsApp
PRIVATE_CHAT_SUFFIX: str = "@s.whatsapp.net"


class Settings(BaseSettings):
    """Configurações lidas do ambiente (prefixo INTERACTIVE_)."""

    model_config = SettingsConfigDict(
        env_prefix="INTERACTIVE_",
        case_sensitive=False,
    )

    # Aplicação
    service_name: str = "interactive_buttons"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"  # json | text

    # Anotações binárias
    private_chat_suffix: str = PRIVATE_CHAT_SUFFIX
    attach_bot_node: bool = True  # Adiciona nó bot{biz_bot=1} em chats privados

    # Limites de aviso (não bloqueiam o envio)
    max_quick_replies: int = 3  # Acima disso alguns clientes não renderizam
    max_elements: int = 10

    def validate_limits(self) -> list[str]:
        """Valida limites configurados.

        Retorna lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if self.max_quick_replies < 1:
            errors.append("INTERACTIVE_MAX_QUICK_REPLIES deve ser >= 1")
        if self.max_elements < 1:
            errors.append("INTERACTIVE_MAX_ELEMENTS deve ser >= 1")
        if self.log_format not in {"json", "text"}:
            errors.append("INTERACTIVE_LOG_FORMAT inválido: use json | text")
        if not self.private_chat_suffix.startswith("@"):
            errors.append("INTERACTIVE_PRIVATE_CHAT_SUFFIX deve começar com '@'")
        return errors


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna uma instância cacheada de Settings."""
    return Settings()
