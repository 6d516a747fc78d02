"""Agregador de settings.

Re-exporta settings e funções de carga a partir do ambiente.
"""

from __future__ import annotations

from config.settings.fsm import FSMSettings, get_fsm_settings

__all__ = [
    "FSMSettings",
    "get_fsm_settings",
]
