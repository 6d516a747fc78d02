"""
Tipos básicos da FSM: nomes, argumentos de evento, callbacks e State.

Um callback é um callable que recebe a tupla de argumentos do evento
ou o nome (str) de um método do host, resolvido uma única vez quando a
instância da máquina é criada.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

StateName: TypeAlias = str
EventName: TypeAlias = str
EventArgs: TypeAlias = tuple[Any, ...]
Callback: TypeAlias = Callable[[EventArgs], Any] | str


@dataclass(frozen=True, slots=True)
class State:
    """
    Estado nomeado com hooks opcionais de entrada e saída.

    Attributes:
        name: Identificador único dentro da Definition
        enter: Executado depois que a máquina passa a apontar para o estado
        exit: Executado antes de a máquina deixar o estado
    """

    name: StateName
    enter: Callback | None = None
    exit: Callback | None = None

    @property
    def has_hooks(self) -> bool:
        """True se ao menos um hook está definido."""
        return self.enter is not None or self.exit is not None

    def __str__(self) -> str:
        return self.name
