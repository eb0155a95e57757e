import random

import pytest

from astarstage.core import Color, CursorType, Key, log, random_int, random_percent


def test_color_white_combines_primaries():
    assert Color(0x0007) is Color.WHITE
    assert Color(0x0004) is Color.RED
    assert Color.WHITE == Color.RED | Color.GREEN | Color.BLUE


def test_key_codes_from_source():
    assert Key(0x1B) is Key.ESCAPE
    assert Key(0x01) is Key.LBUTTON
    assert Key(0x02) is Key.RBUTTON
    assert Key(0x15) is Key.KANA
    assert Key.HANGUL is Key.KANA


def test_cursor_types_distinct():
    members = list(CursorType)
    assert [CursorType(c.value) for c in members] == members
    assert len(members) == 3


@pytest.mark.parametrize("low,high", [(3, 7), (-5, 5), (0, 0)])
def test_random_int_within_bounds(low, high):
    for _ in range(200):
        value = random_int(low, high)
        assert low <= value <= high


def test_random_int_extremes(monkeypatch):
    monkeypatch.setattr(random, "random", lambda: 0.0)
    assert random_int(3, 7) == 3
    monkeypatch.setattr(random, "random", lambda: 0.9999999)
    assert random_int(3, 7) == 7


def test_random_percent_bounds(monkeypatch):
    monkeypatch.setattr(random, "random", lambda: 0.0)
    assert random_percent(2.0, 4.0) == 2.0
    for _ in range(100):
        monkeypatch.setattr(random, "random", random.Random(1).random)
        assert 2.0 <= random_percent(2.0, 4.0) <= 4.0


def test_log_formats_and_writes(capsys):
    written = log("%d,%s", 1, "a")
    assert written == "1,a"
    assert capsys.readouterr().out == written


def test_log_truncates_long_output(capsys):
    written = log("%s", "x" * 5000)
    assert len(written) == 1023
    assert capsys.readouterr().out == written