"""
Definition: descrição compartilhada e somente leitura de uma máquina.

Construída uma vez por tipo de máquina pelo DefinitionBuilder e
referenciada por todas as instâncias.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from fsm.types.state import EventName, State, StateName
from fsm.types.transition import Transition


@dataclass(frozen=True, slots=True)
class Definition:
    """
    Estados, índice de transições por origem e eventos conhecidos.

    Attributes:
        states: Estados em ordem de declaração (o primeiro é o inicial)
        transitions: Índice origem -> transições em ordem de declaração
        events: Eventos distintos na ordem em que apareceram
    """

    states: tuple[State, ...] = ()
    transitions: Mapping[StateName, tuple[Transition, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    events: tuple[EventName, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.transitions, MappingProxyType):
            object.__setattr__(
                self, "transitions", MappingProxyType(dict(self.transitions))
            )

    @property
    def initial_state(self) -> State | None:
        """Primeiro estado declarado (None se a definição está vazia)."""
        return self.states[0] if self.states else None

    @property
    def state_names(self) -> tuple[StateName, ...]:
        return tuple(state.name for state in self.states)

    def get_state(self, name: StateName) -> State | None:
        for state in self.states:
            if state.name == name:
                return state
        return None

    def has_state(self, name: StateName) -> bool:
        return self.get_state(name) is not None

    def responds_to(self, event: EventName) -> bool:
        """True se o evento aparece em ao menos uma transição."""
        return event in self.events

    def transitions_for(
        self,
        state: StateName,
        event: EventName | None = None,
    ) -> tuple[Transition, ...]:
        """Transições de uma origem, opcionalmente filtradas por evento."""
        candidates = self.transitions.get(state, ())
        if event is None:
            return candidates
        return tuple(t for t in candidates if t.event == event)

    def events_for(self, state: StateName) -> tuple[EventName, ...]:
        """Eventos distintos com transição a partir de `state`."""
        seen: list[EventName] = []
        for transition in self.transitions.get(state, ()):
            if transition.event not in seen:
                seen.append(transition.event)
        return tuple(seen)

    def get_summary(self) -> dict[str, object]:
        """Resumo seguro para logs."""
        return {
            "states": list(self.state_names),
            "events": list(self.events),
            "transition_count": sum(len(t) for t in self.transitions.values()),
        }
