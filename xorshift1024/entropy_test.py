"""Tests for the process-wide entropy source."""

from __future__ import annotations

import logging
import threading
import time

import pytest

from xorshift1024 import entropy
from xorshift1024.entropy import EntropyError, EntropySource
from xorshift1024.prng import Xorshift1024Star


@pytest.fixture
def restore_reader():
    yield
    entropy.set_entropy_reader(None)


def test_default_reader_gives_16_words():
    words = EntropySource().draw_seed()
    assert len(words) == 16
    assert all(0 <= w < 1 << 64 for w in words)
    assert any(words)


def test_words_are_little_endian():
    src = EntropySource(lambda n: bytes(range(n)))
    words = src.draw_seed()
    assert words[0] == 0x0706050403020100
    assert words[1] == 0x0F0E0D0C0B0A0908


def test_reader_asked_for_exactly_128_bytes():
    requested = []

    def reader(n):
        requested.append(n)
        return b"\x01" * n

    EntropySource(reader).draw_seed()
    assert requested == [128]


def test_os_failure_is_wrapped_and_chained():
    def reader(n):
        raise OSError("no entropy today")

    with pytest.raises(EntropyError) as excinfo:
        EntropySource(reader).draw_seed()
    assert isinstance(excinfo.value.__cause__, OSError)
    assert "no entropy today" in str(excinfo.value)


def test_short_read_is_refused():
    with pytest.raises(EntropyError):
        EntropySource(lambda n: b"\x01" * (n - 1)).draw_seed()


def test_all_zero_seed_is_refused():
    with pytest.raises(EntropyError):
        EntropySource(lambda n: bytes(n)).draw_seed()


def test_singleton_is_shared():
    assert entropy.get_entropy_source() is entropy.get_entropy_source()


def test_failed_default_construction_propagates(restore_reader):
    def reader(n):
        raise OSError("device gone")

    entropy.set_entropy_reader(reader)
    with pytest.raises(EntropyError):
        Xorshift1024Star()


def test_restoring_default_reader(restore_reader):
    entropy.set_entropy_reader(lambda n: b"\x02" * n)
    assert Xorshift1024Star().get_state() == [0x0202020202020202] * 16
    entropy.set_entropy_reader(None)
    assert Xorshift1024Star().get_state() != [0x0202020202020202] * 16


class _NonReentrantReader:
    """Counts overlapping calls; each call yields a distinct seed."""

    def __init__(self):
        self.active = 0
        self.overlaps = 0
        self.calls = 0

    def __call__(self, n: int) -> bytes:
        self.active += 1
        if self.active > 1:
            self.overlaps += 1
        time.sleep(0.0005)
        self.calls += 1
        data = self.calls.to_bytes(8, "little") * (n // 8)
        self.active -= 1
        return data


def test_concurrent_default_construction_is_serialized(restore_reader):
    reader = _NonReentrantReader()
    entropy.set_entropy_reader(reader)

    states = []
    states_lock = threading.Lock()

    def worker():
        for _ in range(25):
            state = tuple(Xorshift1024Star().get_state())
            with states_lock:
                states.append(state)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert reader.overlaps == 0
    assert reader.calls == 200
    assert len(set(states)) == 200


def test_set_reader_logs_the_installed_reader(restore_reader, caplog):
    def fixed_reader(n):
        return b"\x03" * n

    with caplog.at_level(logging.DEBUG, logger="xorshift1024.entropy"):
        entropy.set_entropy_reader(fixed_reader)
    assert "fixed_reader" in caplog.text
