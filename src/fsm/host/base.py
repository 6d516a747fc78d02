"""
FSMHost: base para classes host que declaram uma máquina de estados.

A subclasse define `fsm_definition` (uma Definition compartilhada por
todas as instâncias) e implementa os callbacks referenciados por nome.
A StateMachine de cada instância é criada no primeiro acesso.

Exemplo:
    builder = DefinitionBuilder("door")
    builder.declare_state("closed")
    builder.declare_transition("closed", "open", "opened", actions="log_open")

    class Door(FSMHost):
        fsm_definition = builder.build()

        def log_open(self, args):
            ...

    door = Door()
    door.run()
    door.fire("open")
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Any, ClassVar

from fsm.manager.machine import StateMachine
from fsm.persistence.hooks import StatePersistence
from fsm.types.definition import Definition
from fsm.types.state import EventArgs, EventName, State, StateName
from utils.errors import ConfigurationError

_MACHINE_ATTR = "_fsm_machine"

# Serializa a criação preguiçosa da StateMachine por instância.
_MACHINE_CREATION_LOCK = threading.Lock()


class FSMHost(StatePersistence):
    """
    Host com máquina de estados embutida.

    O próprio host é o colaborador de persistência: sobrescreva
    prepare_state/save_state para carregar e gravar o estado em um
    armazenamento externo. O padrão é identidade.
    """

    fsm_definition: ClassVar[Definition | None] = None
    fsm_lock_factory: ClassVar[Callable[[], AbstractContextManager[Any]] | None] = None

    @property
    def fsm(self) -> StateMachine:
        """StateMachine da instância (criada sob demanda, uma única vez)."""
        machine = self.__dict__.get(_MACHINE_ATTR)
        if machine is not None:
            return machine
        with _MACHINE_CREATION_LOCK:
            machine = self.__dict__.get(_MACHINE_ATTR)
            if machine is None:
                machine = self._create_machine()
                self.__dict__[_MACHINE_ATTR] = machine
        return machine

    def _create_machine(self) -> StateMachine:
        definition = type(self).fsm_definition
        if definition is None:
            raise ConfigurationError(
                f"{type(self).__name__} não define fsm_definition"
            )
        factory = type(self).fsm_lock_factory
        return StateMachine(
            definition,
            host=self,
            persistence=self,
            lock=factory() if factory is not None else None,
            name=type(self).__name__,
        )

    def run(self, *args: Any, reset: bool = False) -> bool:
        return self.fsm.run(*args, reset=reset)

    def fire(self, event: EventName, *args: Any) -> bool:
        return self.fsm.fire(event, *args)

    def can_fire(self, event: EventName) -> bool:
        return self.fsm.can_fire(event)

    @property
    def state(self) -> StateName:
        return self.fsm.state

    def prepare_state(self, current: State | None, args: EventArgs) -> State | StateName | None:
        return current

    def save_state(self, current: State | None, args: EventArgs) -> State | StateName | None:
        return current
