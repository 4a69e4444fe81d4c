import random
import re

import pytest

from kmin.generator import RAND_MAX, main, parse_count, random_values


@pytest.mark.parametrize("text", ["10", " 10", "+10"])
def test_parse_count_accepts_integers(text):
    assert parse_count(text) == 10


def test_parse_count_zero():
    assert parse_count("0") == 0


@pytest.mark.parametrize("text", ["-1", "12abc", "abc", "+", " "])
def test_parse_count_rejects_invalid(text):
    with pytest.raises(ValueError, match="invalid argument"):
        parse_count(text)


@pytest.mark.parametrize("text", ["9223372036854775807", "99999999999999999999"])
def test_parse_count_rejects_overflow(text):
    with pytest.raises(OverflowError):
        parse_count(text)


def test_random_values_count_and_range():
    values = list(random_values(500))
    assert len(values) == 500
    assert all(-RAND_MAX <= value <= RAND_MAX for value in values)


def test_random_values_deterministic_with_seeded_rng():
    first = list(random_values(50, random.Random(7)))
    second = list(random_values(50, random.Random(7)))
    assert first == second
    assert len(set(first)) > 1


def test_random_values_zero_count():
    assert list(random_values(0, random.Random(1))) == []


def test_main_prints_count_and_values(capsys):
    assert main(["4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "4"
    assert len(lines) == 5
    assert all(re.fullmatch(r"-?\d+\.\d{6}", line) for line in lines[1:])


def test_main_missing_argument(capsys):
    assert main([]) == 1
    assert "missing argument" in capsys.readouterr().err


def test_main_invalid_argument(capsys):
    assert main(["-5"]) == 1
    captured = capsys.readouterr()
    assert "invalid argument" in captured.err
    assert captured.out == ""