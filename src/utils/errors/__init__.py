"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    FSMError,
    MachineNotStartedError,
    UnknownEventError,
    UnknownStateError,
)

__all__ = [
    "ConfigurationError",
    "FSMError",
    "MachineNotStartedError",
    "UnknownEventError",
    "UnknownStateError",
]
