"""
DefinitionBuilder: acumula estados e transições e produz a Definition.

As operações de declaração não levantam exceção no meio do build: cada
uma retorna um DeclarationResult e acumula o erro no builder. O build()
falha de forma ruidosa com um único ConfigurationError listando todos
os erros, antes que qualquer instância comece a despachar eventos.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from fsm.definition.spec import TransitionSpec, normalize_callbacks
from fsm.types.definition import Definition
from fsm.types.state import Callback, EventName, State, StateName
from fsm.types.transition import EMPTY_GUARD, GuardSpec, Transition
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeclarationResult:
    """
    Resultado de uma declaração no builder.

    Attributes:
        error: Erro de configuração (None se aceita)
        created: False quando a declaração já existia (no-op idempotente)
    """

    error: ConfigurationError | None = None
    created: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Levanta o ConfigurationError da declaração, se houver."""
        if self.error is not None:
            raise self.error

    @classmethod
    def accepted(cls, created: bool = True) -> DeclarationResult:
        return cls(created=created)

    @classmethod
    def rejected(cls, message: str) -> DeclarationResult:
        return cls(error=ConfigurationError(message))


class DefinitionBuilder:
    """
    Constrói a Definition de um tipo de máquina.

    Estados mantêm a ordem da primeira aparição (declaração explícita ou
    referência em transição); o primeiro é o estado inicial. Transições
    de uma mesma origem mantêm a ordem de declaração, que decide o
    desempate no dispatch.
    """

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._states: dict[StateName, State] = {}
        self._transitions: dict[StateName, list[Transition]] = {}
        self._events: list[EventName] = []
        self._errors: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def errors(self) -> list[str]:
        """Erros acumulados (cópia)."""
        return list(self._errors)

    def _reject(self, message: str) -> DeclarationResult:
        self._errors.append(message)
        return DeclarationResult.rejected(message)

    def _ensure_state(self, name: StateName) -> None:
        if name not in self._states:
            self._states[name] = State(name=name)

    def declare_state(
        self,
        name: StateName,
        enter: Callback | None = None,
        exit: Callback | None = None,  # noqa: A002
        *,
        overwrite: bool = False,
    ) -> DeclarationResult:
        """
        Registra um estado e seus hooks.

        Redeclarar um estado existente é no-op (hooks originais mantidos),
        exceto com overwrite=True, que substitui os hooks preservando a
        posição original na ordem de declaração.
        """
        if not name or not isinstance(name, str):
            return self._reject(f"nome de estado inválido: {name!r}")

        try:
            normalize_callbacks([h for h in (enter, exit) if h is not None])
        except ValueError as exc:
            return self._reject(f"hook inválido no estado {name!r}: {exc}")

        if name in self._states and not overwrite:
            if enter is not None or exit is not None:
                logger.debug(
                    "state_redeclaration_ignored",
                    extra={"definition": self._name, "state": name},
                )
            return DeclarationResult.accepted(created=False)

        self._states[name] = State(name=name, enter=enter, exit=exit)
        return DeclarationResult.accepted()

    def declare_transition(
        self,
        source: StateName,
        event: EventName,
        target: StateName | None = None,
        *,
        guard_and: Any = (),
        guard_or: Any = (),
        guard_not: Any = (),
        actions: Any = (),
    ) -> DeclarationResult:
        """
        Registra uma transição a partir de `source`.

        Origem e destino são auto-registrados como estados (referências
        adiantadas são válidas). Uma transição idêntica a outra já
        registrada não é duplicada.
        """
        if not event or not isinstance(event, str):
            return self._reject(f"missing event: transição a partir de {source!r} sem evento")
        if not source or not isinstance(source, str):
            return self._reject(f"missing source: transição do evento {event!r} sem estado de origem")
        if target is not None and (not target or not isinstance(target, str)):
            return self._reject(f"destino inválido na transição {source!r} --{event}-->: {target!r}")

        try:
            guard = GuardSpec(
                all_of=normalize_callbacks(guard_and),
                any_of=normalize_callbacks(guard_or),
                none_of=normalize_callbacks(guard_not),
            )
            action_list = normalize_callbacks(actions)
        except ValueError as exc:
            return self._reject(f"transição {source!r} --{event}--> inválida: {exc}")

        self._ensure_state(source)
        if target is not None:
            self._ensure_state(target)
        if event not in self._events:
            self._events.append(event)

        transition = Transition(
            source=source,
            event=event,
            target=target,
            guard=EMPTY_GUARD if guard.is_empty else guard,
            actions=action_list,
        )
        registered = self._transitions.setdefault(source, [])
        if transition in registered:
            return DeclarationResult.accepted(created=False)
        registered.append(transition)
        return DeclarationResult.accepted()

    def declare_transitions(
        self,
        source: StateName,
        *specs: Mapping[str, Any],
    ) -> list[DeclarationResult]:
        """
        Registra transições descritas como mapeamentos de atributos.

        Chaves aceitas: event, new (ou target), guard, guard_and, guard_or,
        guard_not, do, action.
        """
        results: list[DeclarationResult] = []
        for spec in specs:
            if not isinstance(spec, Mapping):
                results.append(
                    self._reject(
                        f"transition spec must be an attribute mapping "
                        f"(estado {source!r}): {spec!r}"
                    )
                )
                continue
            if not spec.get("event"):
                results.append(
                    self._reject(f"missing event: transição a partir de {source!r}: {dict(spec)!r}")
                )
                continue
            try:
                parsed = TransitionSpec.model_validate(dict(spec))
            except ValidationError as exc:
                results.append(
                    self._reject(
                        f"invalid transition spec (estado {source!r}): "
                        f"{exc.error_count()} erro(s): "
                        + "; ".join(f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in exc.errors())
                    )
                )
                continue
            results.append(
                self.declare_transition(
                    source,
                    parsed.event,
                    parsed.target,
                    guard_and=parsed.all_of,
                    guard_or=parsed.guard_or,
                    guard_not=parsed.guard_not,
                    actions=parsed.actions,
                )
            )
        return results

    def validate(self) -> list[str]:
        """
        Valida a definição acumulada.

        Returns:
            Lista de erros encontrados (vazia se válida)
        """
        errors = list(self._errors)
        for source, transitions in self._transitions.items():
            for transition in transitions:
                if transition.target is not None and transition.target not in self._states:
                    errors.append(
                        f"transição {source!r} --{transition.event}--> "
                        f"aponta para estado inexistente {transition.target!r}"
                    )
        return errors

    def build(self) -> Definition:
        """
        Produz a Definition imutável.

        Raises:
            ConfigurationError: Se alguma declaração foi rejeitada
        """
        errors = self.validate()
        if errors:
            raise ConfigurationError(
                f"Definição {self._name or '<anônima>'} inválida "
                f"({len(errors)} erro(s)): " + "; ".join(errors),
                errors=errors,
            )

        definition = Definition(
            states=tuple(self._states.values()),
            transitions={src: tuple(ts) for src, ts in self._transitions.items()},
            events=tuple(self._events),
        )
        logger.info(
            "fsm_definition_built",
            extra={"definition": self._name, **definition.get_summary()},
        )
        return definition
