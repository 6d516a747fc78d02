"""
Exports públicos do módulo fsm/host.

Integração declarativa de máquinas de estado em classes host.
"""

from fsm.host.base import FSMHost

__all__ = ["FSMHost"]
