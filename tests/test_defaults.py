"""Tests for the default configuration."""
from __future__ import annotations

import random
from datetime import timedelta

import pytest

from mysql_canal.config import defaults
from mysql_canal.config.defaults import make_default, random_server_id
from mysql_canal.constants import DEFAULT_CHARSET


class FixedDraw:
    """Random source that always draws the same value."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self.value


def test_default_literals():
    cfg = make_default(random.Random(0))

    assert cfg.address == "127.0.0.1:3306"
    assert cfg.user == "root"
    assert cfg.password == ""
    assert cfg.charset == DEFAULT_CHARSET == "utf8"
    assert cfg.flavor == "mysql"
    assert cfg.dump.tool_path == "mysqldump"
    assert cfg.dump.discard_error_output is True
    assert cfg.dump.skip_master_data is False
    assert cfg.dump.gtid_purged_mode == "none"
    assert cfg.dump.enabled is True


def test_default_leaves_consumer_settings_unset():
    cfg = make_default(random.Random(0))

    assert cfg.heartbeat_period == timedelta(0)
    assert cfg.read_timeout == timedelta(0)
    assert cfg.include_table_regex == []
    assert cfg.exclude_table_regex == []
    assert cfg.max_reconnect_attempts == 0
    assert cfg.semi_sync_enabled is False
    assert cfg.timestamp_string_location is None
    assert cfg.dump.tables == []
    assert cfg.dump.databases == []


@pytest.mark.parametrize("draw, expected", [(0, 1001), (7, 1008), (999, 2000)])
def test_server_id_is_draw_plus_1001(draw, expected):
    rng = FixedDraw(draw)
    assert make_default(rng).server_id == expected
    assert rng.calls == [1000]


def test_server_id_range_over_many_seeds():
    ids = [make_default(random.Random(seed)).server_id for seed in range(200)]
    assert all(1001 <= server_id < 2001 for server_id in ids)
    assert len(set(ids)) > 1


def test_server_id_matches_seeded_source():
    expected = random.Random(42).randrange(1000) + 1001
    assert make_default(random.Random(42)).server_id == expected


def test_default_source_is_seeded_from_clock_seconds(monkeypatch):
    monkeypatch.setattr(defaults.time, "time", lambda: 1700000000.75)
    expected = random.Random(1700000000).randrange(1000) + 1001

    assert random_server_id() == expected
    assert make_default().server_id == expected


def test_default_varies_when_clock_advances(monkeypatch):
    ids = set()
    for second in range(1700000000, 1700000050):
        monkeypatch.setattr(defaults.time, "time", lambda s=second: float(s))
        ids.add(make_default().server_id)
    assert len(ids) > 1


def test_system_random_can_be_injected():
    cfg = make_default(random.SystemRandom())
    assert 1001 <= cfg.server_id < 2001


def test_each_call_returns_a_fresh_config():
    first = make_default(FixedDraw(1))
    second = make_default(FixedDraw(1))
    assert first == second
    assert first is not second
    assert first.dump.extra_options is not second.dump.extra_options
