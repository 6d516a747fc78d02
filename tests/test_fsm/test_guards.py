"""
Testes da composição de guards AND/OR/NOT.

Cobre: GuardResult, evaluate_guard, check_all/check_any/check_none.
"""

from itertools import product
from unittest.mock import MagicMock

import pytest

from fsm import GuardResult, GuardSpec, evaluate_guard
from fsm.rules import (
    REASON_AND_FAILED,
    REASON_NOT_FAILED,
    REASON_OR_FAILED,
    check_all,
    check_any,
    check_none,
)


def _const(value: bool):
    return lambda args: value


def _resolve(callback):
    return callback


class TestGuardResult:
    def test_allow_and_deny(self) -> None:
        allowed = GuardResult.allow()
        assert allowed.allowed is True
        assert allowed.reason is None
        assert bool(allowed)

        denied = GuardResult.deny("motivo")
        assert denied.allowed is False
        assert denied.reason == "motivo"
        assert not denied
        assert "motivo" in repr(denied)


class TestGroups:
    """Semântica de cada grupo isolado, incluindo grupos vazios."""

    def test_empty_groups_are_vacuously_true(self) -> None:
        assert check_all((), (), _resolve)
        assert check_any((), (), _resolve)
        assert check_none((), (), _resolve)

    def test_and_group_requires_all(self) -> None:
        assert check_all((_const(True), _const(True)), (), _resolve)
        assert not check_all((_const(True), _const(False)), (), _resolve)

    def test_or_group_requires_at_least_one(self) -> None:
        assert check_any((_const(False), _const(True)), (), _resolve)
        assert not check_any((_const(False), _const(False)), (), _resolve)

    def test_not_group_requires_none(self) -> None:
        assert check_none((_const(False), _const(False)), (), _resolve)
        assert not check_none((_const(False), _const(True)), (), _resolve)


class TestEvaluateGuard:
    """Combinação dos três grupos em uma decisão."""

    def test_no_spec_or_empty_spec_is_always_allowed(self) -> None:
        assert evaluate_guard(None).allowed
        assert evaluate_guard(GuardSpec()).allowed

    @pytest.mark.parametrize(("a", "b", "c", "d"), list(product([True, False], repeat=4)))
    def test_composition_is_a_and_b_and_c_and_not_d(
        self, a: bool, b: bool, c: bool, d: bool
    ) -> None:
        spec = GuardSpec(
            all_of=(_const(a), _const(b)),
            any_of=(_const(c),),
            none_of=(_const(d),),
        )
        assert evaluate_guard(spec).allowed is (a and b and c and not d)

    def test_denial_reason_names_the_failing_group(self) -> None:
        assert evaluate_guard(GuardSpec(all_of=(_const(False),))).reason == REASON_AND_FAILED
        assert evaluate_guard(GuardSpec(any_of=(_const(False),))).reason == REASON_OR_FAILED
        assert evaluate_guard(GuardSpec(none_of=(_const(True),))).reason == REASON_NOT_FAILED

    def test_predicates_receive_event_args_and_are_not_cached(self) -> None:
        predicate = MagicMock(return_value=True)
        spec = GuardSpec(all_of=(predicate,))

        evaluate_guard(spec, ("hammer",))
        evaluate_guard(spec, ("drill",))

        assert predicate.call_count == 2
        predicate.assert_any_call(("hammer",))
        predicate.assert_called_with(("drill",))

    def test_failed_and_group_short_circuits_other_groups(self) -> None:
        later = MagicMock(return_value=True)
        spec = GuardSpec(all_of=(_const(False),), any_of=(later,), none_of=(later,))

        assert not evaluate_guard(spec)
        later.assert_not_called()

    def test_truthiness_of_predicate_results(self) -> None:
        spec = GuardSpec(all_of=(lambda args: 1,), none_of=(lambda args: [],))
        assert evaluate_guard(spec).allowed

    def test_custom_resolver_is_used_for_named_predicates(self) -> None:
        table = {"is_ready": _const(True), "is_blocked": _const(False)}
        spec = GuardSpec(all_of=("is_ready",), none_of=("is_blocked",))

        assert evaluate_guard(spec, (), table.__getitem__).allowed

    def test_named_predicate_without_resolver_raises(self) -> None:
        with pytest.raises(TypeError, match="host"):
            evaluate_guard(GuardSpec(all_of=("is_ready",)))
