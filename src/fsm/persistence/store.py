"""Protocolo de armazenamento do nome do estado corrente."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fsm.types.state import StateName

DEFAULT_TTL_SECONDS = 7200


class StateStoreProtocol(ABC):
    """Contrato mínimo síncrono para armazenamento de estados por chave."""

    @abstractmethod
    def save(self, key: str, state: StateName, ttl_seconds: int = DEFAULT_TTL_SECONDS) -> None: ...

    @abstractmethod
    def load(self, key: str) -> StateName | None: ...

    @abstractmethod
    def delete(self, key: str) -> bool: ...

    @abstractmethod
    def exists(self, key: str) -> bool: ...
