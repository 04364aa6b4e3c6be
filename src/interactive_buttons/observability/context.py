"""Contexto de correlação para logs estruturados."""

from __future__ import annotations

import contextlib
import uuid
from collections.abc import Generator
from contextvars import ContextVar

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id corrente (ou vazio)."""

    return _correlation_id.get()


@contextlib.contextmanager
def correlation_scope(correlation_id: str | None = None) -> Generator[str, None, None]:
    """Propaga ou gera correlation_id durante um envio.

    Se já houver um correlation_id ativo e nenhum for informado, reutiliza o
    corrente; caso contrário gera um novo uuid4.
    """
    value = correlation_id or _correlation_id.get() or str(uuid.uuid4())
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
