"""
Testes do colaborador de persistência.

Cobre: PassThroughPersistence, StorePersistence, MemoryStateStore e a
ordem prepare -> dispatch -> save no StateMachine.
"""

from unittest.mock import MagicMock, call

import pytest

from fsm import (
    DefinitionBuilder,
    MachineNotStartedError,
    MemoryStateStore,
    PassThroughPersistence,
    State,
    StateMachine,
    StatePersistence,
    StorePersistence,
    UnknownStateError,
)


@pytest.fixture
def definition():
    builder = DefinitionBuilder("door")
    builder.declare_state("closed")
    builder.declare_state("opened")
    builder.declare_transition("closed", "open", "opened")
    builder.declare_transition("opened", "close", "closed")
    return builder.build()


class RecordingPersistence(StatePersistence):
    def __init__(self, loaded: object = None) -> None:
        self.loaded = loaded
        self.calls: list[tuple[str, str | None, tuple]] = []

    def prepare_state(self, current, args):
        self.calls.append(("prepare", current.name if current else None, args))
        return self.loaded if self.loaded is not None else current

    def save_state(self, current, args):
        self.calls.append(("save", current.name if current else None, args))
        return current


class TestMemoryStateStore:
    def test_save_load_delete_exists(self) -> None:
        store = MemoryStateStore()
        assert store.load("k") is None
        assert not store.exists("k")

        store.save("k", "opened")
        assert store.load("k") == "opened"
        assert store.exists("k")
        assert len(store) == 1

        assert store.delete("k") is True
        assert store.delete("k") is False

    def test_expired_entries_are_dropped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        store = MemoryStateStore()
        monkeypatch.setattr("fsm.persistence.memory.time.time", lambda: 1000.0)
        store.save("k", "opened", ttl_seconds=10)

        monkeypatch.setattr("fsm.persistence.memory.time.time", lambda: 1011.0)
        assert store.load("k") is None
        assert not store.exists("k")
        assert len(store) == 0

    def test_len_ignores_expired_entries(self, monkeypatch: pytest.MonkeyPatch) -> None:
        store = MemoryStateStore()
        monkeypatch.setattr("fsm.persistence.memory.time.time", lambda: 1000.0)
        store.save("old", "opened", ttl_seconds=10)
        store.save("fresh", "closed", ttl_seconds=100)

        monkeypatch.setattr("fsm.persistence.memory.time.time", lambda: 1011.0)
        assert len(store) == 1
        assert not store.exists("old")
        assert store.exists("fresh")


class TestDispatchHooks:
    def test_pass_through_is_identity(self) -> None:
        persistence = PassThroughPersistence()
        state = State("a")
        assert persistence.prepare_state(state, ()) is state
        assert persistence.save_state(None, ()) is None

    def test_prepare_and_save_wrap_every_dispatch(self, definition) -> None:
        persistence = RecordingPersistence()
        machine = StateMachine(definition, persistence=persistence)
        machine.run()

        machine.fire("open", 1)
        machine.fire("open", 2)

        assert persistence.calls == [
            ("prepare", "closed", (1,)),
            ("save", "opened", (1,)),
            ("prepare", "opened", (2,)),
            ("save", "opened", (2,)),
        ]

    def test_prepare_can_load_state_by_name(self, definition) -> None:
        machine = StateMachine(definition, persistence=RecordingPersistence(loaded="opened"))
        machine.run()

        assert machine.fire("close") is True
        assert machine.state == "closed"

    def test_prepare_can_start_a_machine_that_never_ran(self, definition) -> None:
        machine = StateMachine(definition, persistence=RecordingPersistence(loaded="opened"))
        assert machine.fire("close") is True
        assert machine.state == "closed"

    def test_prepare_returning_unknown_state_is_fatal(self, definition) -> None:
        machine = StateMachine(definition, persistence=RecordingPersistence(loaded="ghost"))
        machine.run()
        with pytest.raises(UnknownStateError):
            machine.fire("open")

    def test_without_state_and_without_loaded_state_raises(self, definition) -> None:
        machine = StateMachine(definition, persistence=RecordingPersistence())
        with pytest.raises(MachineNotStartedError):
            machine.fire("open")

    def test_save_is_skipped_when_callback_raises(self) -> None:
        persistence = MagicMock(spec=StatePersistence)
        persistence.prepare_state.side_effect = lambda current, args: current

        builder = DefinitionBuilder()
        builder.declare_transition("a", "go", "b", actions=MagicMock(side_effect=RuntimeError))
        machine = StateMachine(builder.build(), persistence=persistence)
        machine.run()

        with pytest.raises(RuntimeError):
            machine.fire("go")
        persistence.save_state.assert_not_called()


class TestStorePersistence:
    def test_state_survives_across_instances(self, definition) -> None:
        store = MemoryStateStore()
        first = StateMachine(definition, persistence=StorePersistence(store, "door-1"))
        first.run()
        first.fire("open")
        assert store.load("door-1") == "opened"

        second = StateMachine(definition, persistence=StorePersistence(store, "door-1"))
        second.run()
        assert second.state == "closed"

        assert second.fire("close") is True
        assert second.state == "closed"
        assert store.load("door-1") == "closed"

    def test_store_receives_ttl(self, definition) -> None:
        store = MagicMock()
        store.load.return_value = None
        machine = StateMachine(
            definition, persistence=StorePersistence(store, "door-2", ttl_seconds=60)
        )
        machine.run()
        machine.fire("open")

        assert store.mock_calls == [
            call.load("door-2"),
            call.save("door-2", "opened", ttl_seconds=60),
        ]

    def test_empty_key_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="key"):
            StorePersistence(MemoryStateStore(), "")
