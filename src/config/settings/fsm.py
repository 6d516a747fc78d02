"""Settings da engine de FSM.

Centraliza a leitura de variáveis de ambiente usadas pelo logging e
pelas instâncias de StateMachine.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


class FSMSettings(BaseModel):
    """Configurações de runtime das máquinas de estado."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    service_name: str = Field(
        default=DEFAULT_SERVICE_NAME,
        min_length=1,
        description="Valor do campo `service` nos logs estruturados.",
    )
    log_level: str = Field(
        default="INFO",
        description="Nível do root logger quando configurado via settings.",
    )
    history_limit: int = Field(
        default=100,
        ge=0,
        description="Máximo de transições mantidas no histórico de cada instância (0 desativa).",
    )
    log_guard_denials: bool = Field(
        default=False,
        description="Emite log de debug para cada candidato recusado por guard.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"FSM_LOG_LEVEL inválido: {value}")
        return level


def _parse_bool(value: str) -> bool:
    """Converte texto de env em bool."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_fsm_settings_from_env() -> FSMSettings:
    """Carrega FSMSettings a partir de variáveis de ambiente."""
    return FSMSettings(
        service_name=os.getenv("FSM_SERVICE_NAME", DEFAULT_SERVICE_NAME),
        log_level=os.getenv("FSM_LOG_LEVEL", "INFO"),
        history_limit=int(os.getenv("FSM_HISTORY_LIMIT", "100")),
        log_guard_denials=_parse_bool(os.getenv("FSM_LOG_GUARD_DENIALS", "false")),
    )


@lru_cache(maxsize=1)
def get_fsm_settings() -> FSMSettings:
    """Retorna instância cacheada de FSMSettings."""
    return _load_fsm_settings_from_env()


__all__ = ["FSMSettings", "get_fsm_settings"]
