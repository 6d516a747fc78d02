"""Correlation id para agrupar logs de um mesmo fluxo de eventos.

Usa ContextVar, então cada thread/tarefa enxerga seu próprio valor.

Uso:
    from config.logging import set_correlation_id, reset_correlation_id

    token = set_correlation_id("pedido-42")
    try:
        machine.fire("work")
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("fsm_correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (string vazia se ausente)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id do contexto; gera UUID v4 quando None.

    Returns:
        Token para restaurar o valor anterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id anterior."""
    _correlation_id.reset(token)
