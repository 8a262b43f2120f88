from __future__ import annotations

import dataclasses

import pytest
from kungfu import Error, Ok

from traversals import Log, WriterResult


def test_recorder_appends_in_place() -> None:
    log: Log[str] = Log()
    record = log.recorder(lambda n: f"n={n}")
    record(1)
    record(2)
    assert log == ["n=1", "n=2"]


def test_recorders_share_their_log() -> None:
    log: Log[int] = Log()
    log.recorder(len)("ab")
    log.recorder(abs)(-3)
    assert log == [2, 3]


def test_visits_on_success() -> None:
    wr = WriterResult(Ok(2), Log(["1", "2"]))
    assert wr.visits == 2


def test_visits_on_error() -> None:
    wr: WriterResult[str] = WriterResult(Error("boom"), Log(["1"]))
    assert wr.visits is None
    assert wr.log[-1] == "1"


def test_is_frozen() -> None:
    wr = WriterResult(Ok(0), Log[str]())
    with pytest.raises(dataclasses.FrozenInstanceError):
        wr.log = Log(["x"])  # type: ignore[misc]


def test_match_positional() -> None:
    match WriterResult(Ok(1), Log(["x"])):
        case WriterResult(Ok(visits), log):
            assert visits == 1
            assert log == ["x"]
        case _:
            raise AssertionError("expected Ok")
