"""Exceções de domínio da FSM.

Erros de configuração indicam falha de programação na definição da
máquina e devem abortar a inicialização. Erros de runtime abortam apenas
o dispatch corrente. Falhas dos callbacks do host nunca são capturadas
pela engine: propagam sem alteração para quem disparou o evento.
"""

from __future__ import annotations


class FSMError(Exception):
    """Base para todos os erros levantados pela engine da FSM."""


class ConfigurationError(FSMError):
    """Definição inválida detectada durante o build.

    Attributes:
        errors: Mensagens individuais (uma por declaração inválida).
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors: list[str] = list(errors) if errors else [message]


class UnknownStateError(FSMError):
    """Estado referenciado não existe na Definition."""

    def __init__(self, state: object) -> None:
        super().__init__(f"Estado desconhecido na definição: {state!r}")
        self.state = state


class UnknownEventError(FSMError):
    """Evento não aparece em nenhuma transição da Definition."""

    def __init__(self, event: object) -> None:
        super().__init__(f"Evento não declarado em nenhuma transição: {event!r}")
        self.event = event


class MachineNotStartedError(FSMError):
    """Operação exige estado corrente, mas run() nunca foi chamado."""

    def __init__(self) -> None:
        super().__init__("Máquina não iniciada: chame run() antes de consultar ou disparar eventos")
