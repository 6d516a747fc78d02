"""Store de estados em memória, apenas para desenvolvimento e testes.

ATENÇÃO: Sem persistência entre reinícios do processo.
"""

from __future__ import annotations

import time

from fsm.persistence.store import DEFAULT_TTL_SECONDS, StateStoreProtocol
from fsm.types.state import StateName


class MemoryStateStore(StateStoreProtocol):
    """Store de estados em memória com expiração por TTL."""

    def __init__(self) -> None:
        self._store: dict[str, tuple[StateName, float]] = {}  # key -> (state, expires_at)

    def _get_live(self, key: str) -> StateName | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        state, expires_at = entry
        if time.time() > expires_at:
            del self._store[key]
            return None
        return state

    def save(self, key: str, state: StateName, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> None:
        self._store[key] = (state, time.time() + ttl_seconds)

    def load(self, key: str) -> StateName | None:
        return self._get_live(key)

    def delete(self, key: str) -> bool:
        if key in self._store:
            del self._store[key]
            return True
        return False

    def exists(self, key: str) -> bool:
        return self._get_live(key) is not None

    def _purge_expired(self) -> None:
        now = time.time()
        expired = [key for key, (_, expires_at) in self._store.items() if now > expires_at]
        for key in expired:
            del self._store[key]

    def __len__(self) -> int:
        """Quantidade de chaves ainda válidas (expiradas são removidas antes)."""
        self._purge_expired()
        return len(self._store)
