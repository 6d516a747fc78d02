"""
Exports públicos do módulo fsm/rules.

Avaliação dos guards compostos das transições.
"""

from fsm.rules.guards import (
    REASON_AND_FAILED,
    REASON_NOT_FAILED,
    REASON_OR_FAILED,
    GuardResult,
    Resolver,
    check_all,
    check_any,
    check_none,
    evaluate_guard,
)

__all__ = [
    "REASON_AND_FAILED",
    "REASON_NOT_FAILED",
    "REASON_OR_FAILED",
    "GuardResult",
    "Resolver",
    "check_all",
    "check_any",
    "check_none",
    "evaluate_guard",
]
