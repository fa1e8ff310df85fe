"""Timer and logging helpers."""

import logging
import time

import pytest

from Caro_AI.Carogame import VARIANTS, GameSession
from Caro_AI.utils import logger, timer


def test_time_remaining_never_negative():
    assert timer.time_remaining(time.time() - 5) == 0.0
    assert timer.time_remaining(timer.deadline_after(10)) > 9


def test_wait_until_past_deadline_does_not_sleep(monkeypatch):
    calls = []
    monkeypatch.setattr(timer.time, "sleep", calls.append)
    timer.wait_until(time.time() - 1)
    assert calls == []


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        logger.configure_logging("chatty")


def test_log_event_prefixes_timestamp(capsys):
    logger.log_event("Move 1: X (7, 7)")
    out = capsys.readouterr().out
    assert out.startswith("[") and out.rstrip().endswith("Move 1: X (7, 7)")


def test_session_transcript_and_stale_turn_logging(caplog):
    lines = []
    s = GameSession(VARIANTS["tictactoe"], logger=lines.append)
    s.play_human(1, 1)
    turn = s.begin_ai_turn()
    s.reset()
    with caplog.at_level(logging.INFO, logger="Caro_AI.Carogame"):
        s.finish_ai_turn(turn)
    assert lines == ["Move 1: X (1, 1)"]
    assert "stale AI turn" in caplog.text
