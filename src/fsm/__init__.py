"""
Módulo FSM: máquinas de estado finitas declarativas.

Um tipo de máquina é descrito uma vez (DefinitionBuilder -> Definition)
e cada instância (StateMachine) guarda apenas o estado corrente.

Estrutura:
    - types/: Tipos de dados (State, Transition, GuardSpec, Definition)
    - definition/: Construção e validação da Definition
    - rules/: Avaliação de guards AND/OR/NOT
    - manager/: StateMachine (run/fire) e execução de callbacks
    - persistence/: Hooks prepare/save e stores de estado
    - host/: Base FSMHost para classes que embutem uma máquina
"""

# Definição
from fsm.definition import (
    DeclarationResult,
    DefinitionBuilder,
    TransitionSpec,
)

# Host
from fsm.host import FSMHost

# Manager
from fsm.manager import (
    StateMachine,
    create_machine,
)

# Persistência
from fsm.persistence import (
    MemoryStateStore,
    PassThroughPersistence,
    StatePersistence,
    StateStoreProtocol,
    StorePersistence,
)

# Guards
from fsm.rules import (
    GuardResult,
    evaluate_guard,
)

# Types
from fsm.types import (
    Definition,
    GuardSpec,
    State,
    Transition,
    TransitionRecord,
)
from utils.errors import (
    ConfigurationError,
    FSMError,
    MachineNotStartedError,
    UnknownEventError,
    UnknownStateError,
)

__version__ = "0.2.0"

__all__ = [
    "ConfigurationError",
    "DeclarationResult",
    "Definition",
    "DefinitionBuilder",
    "FSMError",
    "FSMHost",
    "GuardResult",
    "GuardSpec",
    "MachineNotStartedError",
    "MemoryStateStore",
    "PassThroughPersistence",
    "State",
    "StateMachine",
    "StatePersistence",
    "StateStoreProtocol",
    "StorePersistence",
    "Transition",
    "TransitionRecord",
    "TransitionSpec",
    "UnknownEventError",
    "UnknownStateError",
    "create_machine",
    "evaluate_guard",
]
