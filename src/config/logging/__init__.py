"""Logging estruturado da engine.

Campos obrigatórios em todo log: correlation_id, service, level, logger,
message, asctime.
"""

from config.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from config.logging.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "configure_logging_from_settings",
    "create_json_formatter",
    "get_correlation_id",
    "get_logger",
    "reset_correlation_id",
    "set_correlation_id",
]
