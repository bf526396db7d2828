from typing import Any, List

import pytest

from outline_autolist.buffer import Buffer
from outline_autolist.commands import (
    DELETE_BACK,
    EXTEND,
    Advice,
    CommandConflictError,
    CommandRef,
    CommandRegistry,
    load_default_commands,
)
from outline_autolist.outline import OutlineHost


def make_command(
    command_id: str = "core.test", calls: List[str] | None = None
) -> CommandRef:
    def handler(host: Any) -> str:
        if calls is not None:
            calls.append("command")
        return "native"

    return CommandRef(id=command_id, handler=handler)


def make_advice(
    advice_id: str,
    calls: List[str],
    *,
    priority: int = 0,
    proceed: bool = True,
    command_id: str = "core.test",
) -> Advice:
    def handler(host: Any, cont):
        calls.append(advice_id)
        return cont() if proceed else advice_id

    return Advice(
        id=advice_id, command_id=command_id, handler=handler, priority=priority
    )


def test_invoke_without_advice_runs_command() -> None:
    registry = CommandRegistry()
    registry.register_command(make_command())

    assert registry.invoke("core.test", host=None) == "native"


def test_advice_chain_order() -> None:
    calls: List[str] = []
    registry = CommandRegistry()
    registry.register_command(make_command(calls=calls))
    registry.add_advice(make_advice("first", calls))
    registry.add_advice(make_advice("second", calls))
    registry.add_advice(make_advice("urgent", calls, priority=5))

    result = registry.invoke("core.test", host=None)

    assert result == "native"
    assert calls == ["urgent", "first", "second", "command"]
    assert [a.id for a in registry.advice_for("core.test")] == [
        "urgent",
        "first",
        "second",
    ]


def test_advice_can_skip_the_command() -> None:
    calls: List[str] = []
    registry = CommandRegistry()
    registry.register_command(make_command(calls=calls))
    registry.add_advice(make_advice("outer", calls))
    registry.add_advice(make_advice("override", calls, proceed=False))

    assert registry.invoke("core.test", host=None) == "override"
    assert calls == ["outer", "override"]


def test_duplicate_registrations_conflict() -> None:
    registry = CommandRegistry()
    registry.register_command(make_command())
    registry.add_advice(make_advice("a", []))

    with pytest.raises(CommandConflictError):
        registry.register_command(make_command())
    with pytest.raises(CommandConflictError) as excinfo:
        registry.add_advice(make_advice("a", []))
    assert excinfo.value.kind == "advice"

    registry.add_advice(make_advice("a", [], priority=3), replace=True)
    assert registry.advice_for("core.test")[0].priority == 3


def test_advice_for_unknown_command_raises() -> None:
    registry = CommandRegistry()

    with pytest.raises(KeyError):
        registry.add_advice(make_advice("a", [], command_id="missing"))
    with pytest.raises(KeyError):
        registry.invoke("missing", host=None)


def test_remove_advice_and_stats() -> None:
    registry = CommandRegistry()
    registry.register_command(make_command())
    registry.add_advice(make_advice("a", []))
    before = registry.revision()

    assert registry.remove_advice("a") is not None
    assert registry.remove_advice("a") is None
    assert registry.revision() == before + 1
    assert not registry.has_advice("a")
    stats = registry.stats()
    assert (stats.command_count, stats.advice_count) == (1, 0)


def test_model_validation() -> None:
    with pytest.raises(ValueError):
        CommandRef(id="", handler=lambda host: None)
    with pytest.raises(TypeError):
        Advice(id="a", command_id="b", handler="nope")  # type: ignore[arg-type]


def test_default_commands_edit_the_buffer() -> None:
    registry = CommandRegistry()
    load_default_commands(registry)
    host = OutlineHost(Buffer.from_text("ab", point=1))

    registry.invoke(EXTEND, host)
    assert host.buffer.text == "a\nb"

    registry.invoke(DELETE_BACK, host)
    registry.invoke(DELETE_BACK, host)
    registry.invoke(DELETE_BACK, host)

    assert host.buffer.text == "b"
    assert host.buffer.point == 0


class RecordingHost:
    def __init__(self) -> None:
        self.inserted: List[str] = []

    def point(self) -> int:
        return 0

    def insert_text(self, text: str) -> None:
        self.inserted.append(text)


def test_native_extend_uses_host_insert() -> None:
    registry = CommandRegistry()
    load_default_commands(registry)
    host = RecordingHost()

    registry.invoke(EXTEND, host)
    registry.invoke(DELETE_BACK, host)

    assert host.inserted == ["\n"]
