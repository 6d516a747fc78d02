"""
Exports públicos do módulo fsm/manager.

Máquina de estados (StateMachine) e execução de callbacks.
"""

from fsm.manager.callbacks import CallbackBinder, iter_callback_names, run_actions
from fsm.manager.machine import StateMachine, create_machine

__all__ = [
    "CallbackBinder",
    "StateMachine",
    "create_machine",
    "iter_callback_names",
    "run_actions",
]
