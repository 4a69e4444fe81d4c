import struct

import pytest

from kmin.routines import (
    Stopwatch,
    heap_select,
    is_correct_answer,
    kmin_to_file,
    quick_sort,
)

SAMPLE = [5.5, -3.0, 12.25, 0.0, 7.0, -8.5, 3.5, 3.5, 100.0, -0.5]


def test_quick_sort_sorts_in_place():
    values = list(SAMPLE)
    quick_sort(values)
    assert values == sorted(SAMPLE)


@pytest.mark.parametrize("k", [0, 1, 3, len(SAMPLE)])
def test_heap_select_returns_k_smallest(k):
    values = list(SAMPLE)
    assert heap_select(values, k) == sorted(SAMPLE)[:k]
    assert values == SAMPLE


def test_is_correct_answer_accepts_any_order():
    answer = list(reversed(sorted(SAMPLE)[:4]))
    assert is_correct_answer(SAMPLE, 4, answer) is True


def test_is_correct_answer_accepts_small_error():
    answer = [value + 1e-7 for value in sorted(SAMPLE)[:3]]
    assert is_correct_answer(SAMPLE, 3, answer) is True


def test_is_correct_answer_ignores_extra_items():
    answer = sorted(SAMPLE)[:2] + [1e9, -1e9]
    assert is_correct_answer(SAMPLE, 2, answer) is True


def test_is_correct_answer_rejects_wrong_value(capsys):
    answer = sorted(SAMPLE)[:3]
    answer[1] += 1.0
    assert is_correct_answer(SAMPLE, 3, answer) is False
    err = capsys.readouterr().err
    assert "Resposta incorreta detectada" in err
    assert "Resposta esperada:" in err


def test_is_correct_answer_rejects_short_result():
    assert is_correct_answer(SAMPLE, 3, sorted(SAMPLE)[:2]) is False


def test_stopwatch_laps():
    watch = Stopwatch()
    first = watch.lap()
    second = watch.lap()
    assert first > 1e9
    assert 0.0 <= second < 60.0


def test_kmin_to_file_round_trip(tmp_path):
    path = tmp_path / "out.bin"
    values = sorted(SAMPLE)[:5]
    kmin_to_file(values, str(path))
    data = path.read_bytes()
    assert len(data) == 8 * len(values)
    assert list(struct.unpack(f"@{len(values)}d", data)) == values


def test_kmin_to_file_empty(tmp_path):
    path = tmp_path / "empty.bin"
    kmin_to_file([], str(path))
    assert path.read_bytes() == b""


def test_kmin_to_file_default_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    values = [1.0, 2.0]
    expected_path = tmp_path / "kmin.out"
    kmin_to_file(values)
    data = expected_path.read_bytes()
    assert len(data) == 8 * len(values)
    assert list(struct.unpack(f"@{len(values)}d", data)) == values


def test_kmin_to_file_bad_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        kmin_to_file([1.0], str(tmp_path / "missing" / "out.bin"))