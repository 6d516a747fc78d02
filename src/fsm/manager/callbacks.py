"""
Resolução e execução dos callbacks declarados na Definition.

Nomes de métodos são resolvidos contra o host uma única vez, na criação
da instância; no dispatch a resolução é apenas uma consulta ao dicionário.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from fsm.types.definition import Definition
from fsm.types.state import Callback, EventArgs
from utils.errors import ConfigurationError


def iter_callback_names(definition: Definition) -> Iterator[str]:
    """Nomes de métodos (callbacks str) usados na definição, sem repetição."""
    seen: set[str] = set()
    declared: list[Callback | None] = []
    for state in definition.states:
        declared.extend((state.enter, state.exit))
    for transitions in definition.transitions.values():
        for transition in transitions:
            declared.extend(transition.guard.callbacks())
            declared.extend(transition.actions)
    for callback in declared:
        if isinstance(callback, str) and callback not in seen:
            seen.add(callback)
            yield callback


class CallbackBinder:
    """
    Vincula os callbacks de uma Definition a um host.

    Raises:
        ConfigurationError: Se algum nome não existir no host ou não for
            callable (ou se houver nomes e nenhum host).
    """

    __slots__ = ("_bound",)

    def __init__(self, definition: Definition, host: object | None = None) -> None:
        self._bound: dict[str, Callable[[EventArgs], Any]] = {}
        errors: list[str] = []
        for name in iter_callback_names(definition):
            if host is None:
                errors.append(f"callback {name!r} referenciado por nome exige um host")
                continue
            method = getattr(host, name, None)
            if method is None or not callable(method):
                errors.append(
                    f"host {type(host).__name__} não possui método callable {name!r}"
                )
                continue
            self._bound[name] = method
        if errors:
            raise ConfigurationError(
                "Falha ao vincular callbacks: " + "; ".join(errors),
                errors=errors,
            )

    def resolve(self, callback: Callback) -> Callable[[EventArgs], Any]:
        if isinstance(callback, str):
            return self._bound[callback]
        return callback

    def invoke(self, callback: Callback, args: EventArgs) -> Any:
        return self.resolve(callback)(args)


def run_actions(
    actions: tuple[Callback, ...],
    args: EventArgs,
    resolve: Callable[[Callback], Callable[[EventArgs], Any]],
) -> None:
    """Executa as ações em ordem; uma falha interrompe as seguintes."""
    for action in actions:
        resolve(action)(args)
