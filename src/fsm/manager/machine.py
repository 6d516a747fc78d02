"""
Máquina de estados (StateMachine): ciclo de vida e dispatch de eventos.

Cada instância guarda apenas a referência ao estado corrente (e um
histórico limitado); estados, transições e eventos vêm da Definition
compartilhada.

O dispatch é síncrono. Chamadas concorrentes na mesma instância precisam
ser serializadas pelo chamador, por exemplo passando `lock=RLock()`.
Não há rollback: ações já executadas não são desfeitas se uma ação
posterior falhar, e o novo estado já está efetivado quando o hook de
entrada roda.
"""

from __future__ import annotations

import logging
from collections import deque
from contextlib import AbstractContextManager, nullcontext
from typing import Any

from config.settings import FSMSettings, get_fsm_settings
from fsm.manager.callbacks import CallbackBinder, run_actions
from fsm.persistence.hooks import PassThroughPersistence, StatePersistence
from fsm.rules.guards import evaluate_guard
from fsm.types.definition import Definition
from fsm.types.state import EventArgs, EventName, State, StateName
from fsm.types.transition import Transition, TransitionRecord
from utils.errors import (
    ConfigurationError,
    MachineNotStartedError,
    UnknownEventError,
    UnknownStateError,
)

logger = logging.getLogger(__name__)


class StateMachine:
    """
    Instância de uma máquina de estados.

    Attributes:
        definition: Definition compartilhada (somente leitura)
        state: Nome do estado corrente
        history: Transições efetivadas (mais antigas descartadas no limite)
    """

    __slots__ = (
        "_callbacks",
        "_current",
        "_definition",
        "_history",
        "_lock",
        "_log_guard_denials",
        "_name",
        "_persistence",
    )

    def __init__(
        self,
        definition: Definition,
        host: object | None = None,
        persistence: StatePersistence | None = None,
        *,
        lock: AbstractContextManager[Any] | None = None,
        settings: FSMSettings | None = None,
        name: str = "",
    ) -> None:
        """
        Inicializa a instância (ainda sem estado; ver run()).

        Args:
            definition: Definition produzida por DefinitionBuilder.build()
            host: Objeto cujos métodos resolvem callbacks declarados por nome
            persistence: Colaborador de persistência (identidade se None)
            lock: Context manager que serializa run()/fire()
            settings: Settings de runtime (get_fsm_settings() se None)
            name: Identificador da instância para logs
        """
        resolved_settings = settings or get_fsm_settings()
        self._definition = definition
        self._callbacks = CallbackBinder(definition, host)
        self._persistence = persistence or PassThroughPersistence()
        self._lock = lock if lock is not None else nullcontext()
        self._current: State | None = None
        self._history: deque[TransitionRecord] = deque(maxlen=resolved_settings.history_limit)
        self._log_guard_denials = resolved_settings.log_guard_denials
        self._name = name

    def __repr__(self) -> str:
        current = self._current.name if self._current else None
        return f"StateMachine(name={self._name!r}, state={current!r})"

    @property
    def definition(self) -> Definition:
        return self._definition

    @property
    def name(self) -> str:
        return self._name

    @property
    def current(self) -> State | None:
        """State corrente (None antes de run())."""
        return self._current

    @property
    def is_started(self) -> bool:
        return self._current is not None

    @property
    def state(self) -> StateName:
        """
        Nome do estado corrente.

        Raises:
            MachineNotStartedError: Se run() nunca foi chamado
        """
        return self._require_current().name

    @property
    def history(self) -> list[TransitionRecord]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    def run(self, *args: Any, reset: bool = False) -> bool:
        """
        Inicia a máquina no primeiro estado declarado.

        Idempotente: se já houver estado corrente, não faz nada (a menos
        que reset=True). O hook de entrada do estado inicial recebe `args`.

        Returns:
            True se o estado inicial foi (re)definido

        Raises:
            ConfigurationError: Se a definição não tem estados
        """
        with self._lock:
            if self._current is not None and not reset:
                return False
            initial = self._definition.initial_state
            if initial is None:
                raise ConfigurationError("Definição sem estados: impossível iniciar a máquina")
            self._current = initial
            logger.debug(
                "fsm_machine_started",
                extra={"machine": self._name, "state": initial.name, "reset": reset},
            )
            if initial.enter is not None:
                self._callbacks.invoke(initial.enter, args)
            return True

    def fire(self, event: EventName, *args: Any) -> bool:
        """
        Despacha um evento contra o estado corrente.

        Returns:
            True se uma transição foi encontrada e aplicada; False se
            nenhuma transição elegível existe (estado inalterado)

        Raises:
            UnknownEventError: Se o evento não existe na definição
            MachineNotStartedError: Se não há estado corrente
            UnknownStateError: Se o destino não existe na definição
        """
        if not self._definition.responds_to(event):
            raise UnknownEventError(event)
        with self._lock:
            return self._dispatch(event, tuple(args))

    def can_fire(self, event: EventName) -> bool:
        """True se o estado corrente tem transição para o evento (guards não avaliados)."""
        with self._lock:
            return event in self._current_events()

    def available_events(self) -> tuple[EventName, ...]:
        """Eventos com transição a partir do estado corrente."""
        with self._lock:
            return self._current_events()

    def get_state_summary(self) -> dict[str, Any]:
        """
        Retorna resumo do estado atual para observability.

        Returns:
            Dict com informações do estado (seguro para logs)
        """
        with self._lock:
            current = self._current
            return {
                "machine": self._name,
                "current_state": current.name if current else None,
                "started": current is not None,
                "transition_count": len(self._history),
                "available_events": list(self._current_events()),
            }

    def get_history_summary(self) -> list[dict[str, Any]]:
        """Histórico em formato seguro para logs."""
        with self._lock:
            return [record.to_log_dict() for record in self._history]

    def _current_events(self) -> tuple[EventName, ...]:
        if self._current is None:
            return ()
        return self._definition.events_for(self._current.name)

    def _require_current(self) -> State:
        if self._current is None:
            raise MachineNotStartedError()
        return self._current

    def _resolve_state(self, name: StateName) -> State:
        state = self._definition.get_state(name)
        if state is None:
            logger.error(
                "fsm_unknown_state",
                extra={"machine": self._name, "state": name},
            )
            raise UnknownStateError(name)
        return state

    def _adopt(self, prepared: State | StateName | None) -> None:
        """Aplica o estado devolvido por prepare_state."""
        if prepared is None or prepared is self._current:
            return
        name = prepared.name if isinstance(prepared, State) else prepared
        self._current = self._resolve_state(name)

    def _select_transition(
        self,
        state: StateName,
        event: EventName,
        args: EventArgs,
    ) -> Transition | None:
        """Primeiro candidato, em ordem de declaração, cujo guard passa."""
        for candidate in self._definition.transitions_for(state, event):
            result = evaluate_guard(candidate.guard, args, self._callbacks.resolve)
            if result.allowed:
                return candidate
            if self._log_guard_denials:
                logger.debug(
                    "fsm_guard_denied",
                    extra={
                        "machine": self._name,
                        "reason": result.reason,
                        **candidate.to_log_dict(),
                    },
                )
        return None

    def _dispatch(self, event: EventName, args: EventArgs) -> bool:
        self._adopt(self._persistence.prepare_state(self._current, args))
        current = self._require_current()

        transition = self._select_transition(current.name, event, args)
        if transition is None:
            logger.debug(
                "fsm_no_transition",
                extra={"machine": self._name, "state": current.name, "event": event},
            )
        else:
            run_actions(transition.actions, args, self._callbacks.resolve)
            if transition.target is not None:
                self._change_state(transition, args)

        self._persistence.save_state(self._current, args)
        return transition is not None

    def _change_state(self, transition: Transition, args: EventArgs) -> None:
        target = self._resolve_state(transition.target)
        previous = self._require_current()

        if previous.exit is not None:
            self._callbacks.invoke(previous.exit, args)

        self._current = target
        self._history.append(
            TransitionRecord(
                from_state=previous.name,
                to_state=target.name,
                event=transition.event,
            )
        )
        logger.debug(
            "fsm_transition_applied",
            extra={
                "machine": self._name,
                "event": transition.event,
                "from_state": previous.name,
                "to_state": target.name,
            },
        )

        if target.enter is not None:
            self._callbacks.invoke(target.enter, args)


def create_machine(
    definition: Definition,
    host: object | None = None,
    persistence: StatePersistence | None = None,
    name: str = "",
) -> StateMachine:
    """
    Factory function para criar uma StateMachine.

    Args:
        definition: Definition compartilhada
        host: Host para callbacks declarados por nome (opcional)
        persistence: Colaborador de persistência (opcional)
        name: Identificador da instância para logs

    Returns:
        StateMachine configurada (ainda não iniciada)
    """
    return StateMachine(definition, host=host, persistence=persistence, name=name)
