"""
Exports públicos do módulo fsm/types.

Tipos e estruturas de dados da definição e das transições.
"""

from fsm.types.definition import Definition
from fsm.types.state import Callback, EventArgs, EventName, State, StateName
from fsm.types.transition import (
    EMPTY_GUARD,
    GuardSpec,
    Transition,
    TransitionRecord,
)

__all__ = [
    "EMPTY_GUARD",
    "Callback",
    "Definition",
    "EventArgs",
    "EventName",
    "GuardSpec",
    "State",
    "StateName",
    "Transition",
    "TransitionRecord",
]
