"""
Forma de mapeamento de atributos para declarar transições.

Equivale a `{"event": "work", "guard": check_counter, "new": "working"}`:
as chaves são validadas por um modelo pydantic antes de virarem
argumentos de DefinitionBuilder.declare_transition.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fsm.types.state import Callback


def normalize_callbacks(value: Any) -> tuple[Callback, ...]:
    """
    Converte um callback único ou uma sequência em tupla de callbacks.

    Raises:
        ValueError: Se algum item não for callable nem nome de método.
    """
    if value is None:
        return ()
    items = tuple(value) if isinstance(value, list | tuple) else (value,)
    for item in items:
        if isinstance(item, str):
            if not item.strip():
                raise ValueError("nome de callback não pode ser vazio")
        elif not callable(item):
            raise ValueError(f"callback deve ser callable ou nome de método: {item!r}")
    return items


class TransitionSpec(BaseModel):
    """Transição declarada como mapeamento de atributos."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    event: str = Field(min_length=1, description="Evento que dispara a transição.")
    target: str | None = Field(
        default=None,
        alias="new",
        description="Estado de destino; ausente/None mantém o estado atual.",
    )
    guard: tuple[Any, ...] = Field(default=(), description="Atalho para guard_and.")
    guard_and: tuple[Any, ...] = ()
    guard_or: tuple[Any, ...] = ()
    guard_not: tuple[Any, ...] = ()
    do: tuple[Any, ...] = Field(default=(), description="Ações executadas antes de `action`.")
    action: tuple[Any, ...] = ()

    @field_validator(
        "guard", "guard_and", "guard_or", "guard_not", "do", "action", mode="before"
    )
    @classmethod
    def coerce_callbacks(cls, value: Any) -> tuple[Callback, ...]:
        return normalize_callbacks(value)

    @property
    def all_of(self) -> tuple[Callback, ...]:
        return self.guard + self.guard_and

    @property
    def actions(self) -> tuple[Callback, ...]:
        return self.do + self.action
