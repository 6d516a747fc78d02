"""
Avaliação de guards compostos (grupos AND, OR e NOT).

Cada dispatch reavalia os predicados do zero; nada é cacheado.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fsm.types.state import Callback, EventArgs
from fsm.types.transition import GuardSpec

Resolver = Callable[[Callback], Callable[[EventArgs], Any]]

REASON_AND_FAILED = "guard_and_failed"
REASON_OR_FAILED = "guard_or_failed"
REASON_NOT_FAILED = "guard_not_failed"


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é elegível
        reason: Grupo que recusou (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    def __bool__(self) -> bool:
        return self.allowed

    def __repr__(self) -> str:
        return f"GuardResult(allowed={self.allowed}, reason={self.reason!r})"

    @classmethod
    def allow(cls) -> GuardResult:
        """Cria resultado permitindo a transição."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> GuardResult:
        """Cria resultado negando a transição."""
        return cls(allowed=False, reason=reason)


def _identity_resolver(callback: Callback) -> Callable[[EventArgs], Any]:
    if isinstance(callback, str):
        raise TypeError(
            f"Predicado {callback!r} referenciado por nome exige um host para resolução"
        )
    return callback


def check_all(predicates: tuple[Callback, ...], args: EventArgs, resolve: Resolver) -> bool:
    """Grupo AND: todos verdadeiros (vazio é verdadeiro)."""
    return all(resolve(p)(args) for p in predicates)


def check_any(predicates: tuple[Callback, ...], args: EventArgs, resolve: Resolver) -> bool:
    """Grupo OR: ao menos um verdadeiro (vazio é verdadeiro)."""
    if not predicates:
        return True
    return any(resolve(p)(args) for p in predicates)


def check_none(predicates: tuple[Callback, ...], args: EventArgs, resolve: Resolver) -> bool:
    """Grupo NOT: nenhum verdadeiro (vazio é verdadeiro)."""
    return not any(resolve(p)(args) for p in predicates)


def evaluate_guard(
    spec: GuardSpec | None,
    args: EventArgs = (),
    resolve: Resolver | None = None,
) -> GuardResult:
    """
    Combina os três grupos de um GuardSpec em uma única decisão.

    Os grupos são avaliados na ordem AND, OR, NOT, com curto-circuito
    dentro de cada grupo e entre grupos.

    Args:
        spec: Guards da transição (None = sempre elegível)
        args: Argumentos do evento, repassados a cada predicado
        resolve: Converte um callback declarado em callable; por padrão
            aceita apenas callables

    Returns:
        GuardResult.allow() se todos os grupos presentes forem satisfeitos
    """
    if spec is None or spec.is_empty:
        return GuardResult.allow()

    resolver = resolve or _identity_resolver

    if not check_all(spec.all_of, args, resolver):
        return GuardResult.deny(REASON_AND_FAILED)
    if not check_any(spec.any_of, args, resolver):
        return GuardResult.deny(REASON_OR_FAILED)
    if not check_none(spec.none_of, args, resolver):
        return GuardResult.deny(REASON_NOT_FAILED)

    return GuardResult.allow()
