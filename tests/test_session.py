import random

import pytest

from oddflash.sequence import Stimulus, make_sequence
from oddflash.session import FlashSession, Signal


class FakeSender:
    def __init__(self, available=True):
        self.available = available
        self.sent = []

    def is_available(self):
        return self.available

    def send(self, port, data):
        self.sent.append((port, int(data)))
        return self.available


def test_start_sends_start_code_to_port():
    sender = FakeSender()
    session = FlashSession(sender, 8888, random.Random(1))
    session.start(500, 300, 10, 0x378)
    assert sender.sent == [(0x378, Signal.START)]
    assert session.port_address == 0x378


def test_start_without_connection_sends_nothing():
    sender = FakeSender(available=False)
    session = FlashSession(sender, 8888, random.Random(1))
    session.start(500, 300, 10, 8888)
    assert sender.sent == []


def test_start_returns_sequence_from_rng():
    session = FlashSession(FakeSender(), 8888, random.Random(7))
    sequence = session.start(500, 300, 40, 8888)
    assert sequence == make_sequence(40, random.Random(7))
    assert len(sequence) == 40


def test_steps_send_code_per_stimulus():
    sender = FakeSender()
    session = FlashSession(sender, 8888, random.Random(3))
    sequence = session.start(500, 300, 20, 8888)
    shown = [session.step() for _ in range(20)]
    assert shown == sequence
    expected = [
        (8888, Signal.GRAY if s is Stimulus.STANDARD else Signal.COLOR)
        for s in sequence
    ]
    assert sender.sent[1:] == expected
    assert session.current_flashes == 20


def test_step_after_last_flash_ends_session():
    sender = FakeSender()
    session = FlashSession(sender, 8888, random.Random(3))
    session.start(500, 300, 5, 8888)
    for _ in range(5):
        assert session.step() is not None
    assert not session.finished()
    assert session.step() is None
    assert sender.sent[-1] == (8888, Signal.END)
    assert session.finished()
    assert session.sequence == []
    assert session.current_flashes == 0


def test_end_code_not_sent_without_connection():
    sender = FakeSender(available=False)
    session = FlashSession(sender, 8888, random.Random(3))
    session.start(500, 300, 3, 8888)
    for _ in range(4):
        session.step()
    assert all(code != Signal.END for _, code in sender.sent)
    assert len(sender.sent) == 3
    assert session.finished()


def test_step_before_start_raises():
    session = FlashSession(FakeSender())
    with pytest.raises(RuntimeError):
        session.step()


def test_step_after_finish_raises():
    session = FlashSession(FakeSender(), 8888, random.Random(0))
    session.start(500, 300, 1, 8888)
    session.step()
    session.step()
    with pytest.raises(RuntimeError):
        session.step()


def test_restart_after_finish():
    sender = FakeSender()
    session = FlashSession(sender, 8888, random.Random(0))
    session.start(500, 300, 1, 8888)
    session.step()
    session.step()
    assert session.finished()
    session.start(100, 100, 2, 9000)
    assert not session.finished()
    assert session.step() is Stimulus.STANDARD
    assert sender.sent[-1] == (9000, Signal.GRAY)


def test_period_is_interval_plus_duration():
    session = FlashSession(FakeSender())
    session.start(250, 750, 4, 8888)
    assert session.period() == 250 + 750


def test_reset_before_start_is_not_finished():
    session = FlashSession(FakeSender())
    session.reset()
    assert session.finished() is False