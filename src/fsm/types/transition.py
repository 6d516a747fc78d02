"""
Transições, especificação de guards e registros de histórico.

Transições são valores imutáveis: duas declarações com os mesmos campos
são a mesma transição, o que torna o registro idempotente.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.types.state import Callback, EventName, StateName


@dataclass(frozen=True, slots=True)
class GuardSpec:
    """
    Três grupos independentes de predicados.

    Attributes:
        all_of: Todos precisam retornar verdadeiro (grupo AND)
        any_of: Ao menos um precisa retornar verdadeiro (grupo OR)
        none_of: Nenhum pode retornar verdadeiro (grupo NOT)

    Grupos vazios não impõem restrição.
    """

    all_of: tuple[Callback, ...] = ()
    any_of: tuple[Callback, ...] = ()
    none_of: tuple[Callback, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True quando nenhum grupo tem predicados (sempre elegível)."""
        return not (self.all_of or self.any_of or self.none_of)

    def callbacks(self) -> tuple[Callback, ...]:
        """Todos os predicados, na ordem AND, OR, NOT."""
        return self.all_of + self.any_of + self.none_of


EMPTY_GUARD = GuardSpec()


@dataclass(frozen=True, slots=True)
class Transition:
    """
    Regra (origem, evento) -> destino opcional.

    Attributes:
        source: Estado de origem
        event: Nome do evento que dispara a regra
        target: Estado de destino; None mantém o estado atual sem hooks
        guard: Guards AND/OR/NOT avaliados antes de aplicar
        actions: Executadas em ordem quando a transição é aplicada
    """

    source: StateName
    event: EventName
    target: StateName | None = None
    guard: GuardSpec = EMPTY_GUARD
    actions: tuple[Callback, ...] = ()

    @property
    def changes_state(self) -> bool:
        return self.target is not None

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs (sem callables)."""
        return {
            "source": self.source,
            "event": self.event,
            "target": self.target,
            "guarded": not self.guard.is_empty,
            "action_count": len(self.actions),
        }


@dataclass(frozen=True, slots=True)
class TransitionRecord:
    """
    Registro imutável de uma mudança de estado efetivada.

    Attributes:
        from_state: Estado de origem
        to_state: Estado de destino
        event: Evento que causou a transição
        timestamp: Momento da troca de estado (UTC)
    """

    from_state: StateName
    to_state: StateName
    event: EventName
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.event:
            raise ValueError("event não pode ser vazio")

    def to_log_dict(self) -> dict[str, Any]:
        return {
            "from_state": self.from_state,
            "to_state": self.to_state,
            "event": self.event,
            "timestamp": self.timestamp.isoformat(),
        }
