"""
Exports públicos do módulo fsm/definition.

Construção da Definition (estados, transições e eventos).
"""

from fsm.definition.builder import DeclarationResult, DefinitionBuilder
from fsm.definition.spec import TransitionSpec, normalize_callbacks

__all__ = [
    "DeclarationResult",
    "DefinitionBuilder",
    "TransitionSpec",
    "normalize_callbacks",
]
