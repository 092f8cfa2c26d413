from __future__ import annotations

from dataclasses import dataclass, field

from lib_log_leveled.adapters.dump import RichDumper
from lib_log_leveled.application.ports import DumperPort


@dataclass
class Payload:
    name: str
    tags: list[str] = field(default_factory=list)


def test_rich_dumper_satisfies_port() -> None:
    assert isinstance(RichDumper(), DumperPort)


def test_each_value_becomes_its_own_block() -> None:
    text = RichDumper()(Payload("alpha", ["x"]), {"beta": 2})
    blocks = text.splitlines()
    assert blocks == ["Payload(name='alpha', tags=['x'])", "{'beta': 2}"]
    assert text.endswith("\n")


def test_wide_structures_expand_over_several_lines() -> None:
    text = RichDumper(max_width=20)({"first": "a" * 10, "second": "b" * 10})
    assert text.count("\n") > 1
    assert "'first'" in text and "'second'" in text


def test_limits_are_applied() -> None:
    text = RichDumper(max_length=2)(list(range(10)))
    assert "... +8" in text


def test_no_values_render_nothing() -> None:
    assert RichDumper()() == ""
