"""
Hooks de persistência chamados em volta de cada dispatch.

prepare_state roda antes da busca de transições e pode devolver o
estado carregado de um armazenamento externo; save_state roda ao final
do dispatch, tenha havido transição ou não.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from fsm.persistence.store import DEFAULT_TTL_SECONDS, StateStoreProtocol
from fsm.types.state import EventArgs, State, StateName

logger = logging.getLogger(__name__)


class StatePersistence(ABC):
    """Contrato do colaborador de persistência da máquina."""

    @abstractmethod
    def prepare_state(
        self, current: State | None, args: EventArgs
    ) -> State | StateName | None:
        """Retorna o estado a usar no dispatch (nome ou State)."""

    @abstractmethod
    def save_state(
        self, current: State | None, args: EventArgs
    ) -> State | StateName | None:
        """Persiste o estado após o dispatch; o retorno é ignorado pela engine."""


class PassThroughPersistence(StatePersistence):
    """Identidade: o estado vive apenas na instância."""

    def prepare_state(self, current: State | None, args: EventArgs) -> State | None:
        return current

    def save_state(self, current: State | None, args: EventArgs) -> State | None:
        return current


class StorePersistence(StatePersistence):
    """
    Guarda o nome do estado corrente em um StateStoreProtocol.

    Args:
        store: Armazenamento de estados
        key: Chave da instância no store (ex: id da entidade host)
        ttl_seconds: Validade de cada gravação
    """

    def __init__(
        self,
        store: StateStoreProtocol,
        key: str,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ) -> None:
        if not key:
            raise ValueError("key não pode ser vazio")
        self._store = store
        self._key = key
        self._ttl_seconds = ttl_seconds

    @property
    def key(self) -> str:
        return self._key

    def prepare_state(
        self, current: State | None, args: EventArgs
    ) -> State | StateName | None:
        stored = self._store.load(self._key)
        if stored is None:
            return current
        return stored

    def save_state(self, current: State | None, args: EventArgs) -> State | None:
        if current is not None:
            self._store.save(self._key, current.name, ttl_seconds=self._ttl_seconds)
            logger.debug(
                "fsm_state_saved",
                extra={"store_key": self._key, "state": current.name},
            )
        return current
