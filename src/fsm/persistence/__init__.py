"""
Exports públicos do módulo fsm/persistence.

Colaborador de persistência do estado corrente (hooks e stores).
"""

from fsm.persistence.hooks import (
    PassThroughPersistence,
    StatePersistence,
    StorePersistence,
)
from fsm.persistence.memory import MemoryStateStore
from fsm.persistence.store import DEFAULT_TTL_SECONDS, StateStoreProtocol

__all__ = [
    "DEFAULT_TTL_SECONDS",
    "MemoryStateStore",
    "PassThroughPersistence",
    "StatePersistence",
    "StateStoreProtocol",
    "StorePersistence",
]
