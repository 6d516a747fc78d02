"""Formatter JSON dos logs da engine.

Todo registro carrega os campos de REQUIRED_LOG_FIELDS; campos passados
via `extra` (state, event, target...) são anexados pelo JsonFormatter.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter com os campos obrigatórios renomeados.

    Exemplo de output:
        {
            "asctime": "2026-10-19 10:30:00,123",
            "level": "DEBUG",
            "logger": "fsm.manager.machine",
            "message": "fsm_transition_applied",
            "correlation_id": "pedido-42",
            "service": "simplefsm",
            "event": "work",
            "from_state": "resting",
            "to_state": "working"
        }
    """
    format_string = " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
