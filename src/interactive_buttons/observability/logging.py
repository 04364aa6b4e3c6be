"""Configuração de logging estruturado (JSON ou texto) a partir de Settings."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

from interactive_buttons.config.settings import Settings, get_settings
from interactive_buttons.observability.context import get_correlation_id

_JSON_FIELDS = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "%(correlation_id)s %(service)s %(environment)s"
)
_TEXT_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"


class CorrelationIdFilter(logging.Filter):
    """Insere correlation_id, service e environment no record de log.

    Importante: nunca adicionar destinatário, texto da mensagem ou
    parâmetros de botões nos logs.
    """

    def __init__(self, service_name: str, environment: str = "development") -> None:
        super().__init__()
        self._service_name = service_name
        self._environment = environment

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else get_correlation_id()
        record.service = self._service_name
        record.environment = self._environment
        return True


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "text":
        return logging.Formatter(_TEXT_FORMAT)
    return JsonFormatter(
        _JSON_FIELDS,
        rename_fields={"levelname": "level", "name": "logger"},
    )


def configure_logging(settings: Settings | None = None) -> Settings:
    """Configura o root logger conforme as Settings.

    Args:
        settings: Configurações (default: get_settings())

    Returns:
        As Settings efetivamente aplicadas

    Raises:
        ValueError: Se as Settings tiverem valores inválidos
    """
    settings = settings or get_settings()
    errors = settings.validate_limits()
    if errors:
        raise ValueError(f"Configuração inválida: {'; '.join(errors)}")

    level = settings.log_level.upper()
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(_build_formatter(settings.log_format))
    handler.addFilter(CorrelationIdFilter(settings.service_name, settings.environment))

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers = [handler]
    return settings


def get_logger(name: str) -> logging.Logger:
    """Retorna logger simples; o filtro injeta service/correlation_id."""

    return logging.getLogger(name)
