"""Configuração centralizada de logging estruturado (JSON).

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="DEBUG", service_name="worker")
    logger = get_logger(__name__)
    logger.debug("fsm_transition_applied", extra={"event": "work"})

A engine só emite logs; quem configura handlers é a aplicação host.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.correlation import get_correlation_id
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "simplefsm"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único StreamHandler JSON no root logger.

    Args:
        level: Nível de log (case insensitive).
        service_name: Valor do campo `service` em todos os registros.
        correlation_id_getter: Fonte do correlation_id; por padrão o
            ContextVar de config.logging.correlation.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(
        CorrelationIdFilter(service_name, correlation_id_getter or get_correlation_id)
    )

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substitui handlers existentes para evitar duplicação
    root.handlers = [handler]


def configure_logging_from_settings() -> None:
    """Configura logging com os valores de FSMSettings (variáveis de ambiente)."""
    from config.settings import get_fsm_settings

    settings = get_fsm_settings()
    configure_logging(level=settings.log_level, service_name=settings.service_name)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (geralmente __name__)."""
    return logging.getLogger(name)
