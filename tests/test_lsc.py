from __future__ import annotations

import pytest

from lstheme.lsc import LSColors, Pair, parse_style
from lstheme.style import (
    BLACK, BLUE, BRIGHT_GRAY, DARK_GRAY, GREEN, PURPLE, RED, WHITE, YELLOW,
    Style, fixed, rgb,
)


def pairs(definition):
    return [(p.key, p.value) for p in LSColors(definition).pairs()]


@pytest.mark.parametrize("definition", ["", ":", "::::", "a", "=", "a=", "=b", "a:b"])
def test_no_pairs(definition):
    assert pairs(definition) == []


def test_pairs_in_order():
    assert pairs("a=b:c=d") == [("a", "b"), ("c", "d")]


def test_pairs_skip_broken_pieces():
    assert pairs("a=b::c:=d:e=f") == [("a", "b"), ("e", "f")]


def test_value_keeps_later_equals_signs():
    assert pairs("a=b=c") == [("a", "b=c")]


@pytest.mark.parametrize("value, expected", [
    ("", Style()),
    ("0", Style()),
    ("1", Style().bold()),
    ("01", Style().bold()),
    ("01;1;001", Style().bold()),
    ("2", Style().dimmed()),
    ("3", Style().italic()),
    ("4", Style().underline()),
    ("5", Style().blink()),
    ("7", Style().reverse()),
    ("8", Style().hidden()),
    ("9", Style().strikethrough()),
    ("30", Style.of(BLACK)),
    ("31", Style.of(RED)),
    ("37", Style.of(WHITE)),
    ("90", Style.of(DARK_GRAY)),
    ("97", Style.of(BRIGHT_GRAY)),
    ("41", Style().on(RED)),
    ("100", Style().on(DARK_GRAY)),
    ("1;34", Style.of(BLUE).bold()),
    ("34;1", Style.of(BLUE).bold()),
    ("4;32;1", Style.of(GREEN).bold().underline()),
    ("31;43", Style.of(RED).on(YELLOW)),
    ("38;5;100", Style.of(fixed(100))),
    ("38;5;0255", Style.of(fixed(255))),
    ("48;5;35", Style().on(fixed(35))),
    ("38;2;255;100;0", Style.of(rgb(255, 100, 0))),
    ("48;2;1;2;3", Style().on(rgb(1, 2, 3))),
    ("38;5;100;48;5;200;1", Style.of(fixed(100)).on(fixed(200)).bold()),
])
def test_parse_style(value, expected):
    assert parse_style(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("6", Style()),
    ("banana", Style()),
    ("35;banana", Style.of(PURPLE)),
    ("38", Style()),
    ("38;5", Style()),
    ("38;5;256", Style()),
    ("38;5;-1", Style()),
    ("38;9;1", Style().strikethrough().bold()),
    ("38;2;255;255", Style()),
    ("38;2;255;255;256", Style()),
    # the bad palette number is consumed, the bold after it still counts
    ("38;5;x;1", Style().bold()),
])
def test_parse_style_ignores_malformed_codes(value, expected):
    assert parse_style(value) == expected


def test_pair_to_style():
    assert Pair("di", "1;34").to_style() == Style.of(BLUE).bold()
