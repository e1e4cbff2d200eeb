import sys
from itertools import islice

import pytest
from pydantic import ValidationError

from fibs import Fibonacci, IntType, SequenceConfig, fib, max_index


def test_first_five():
    assert list(islice(Fibonacci(start_index=0), 5)) == [0, 1, 1, 2, 3]


@pytest.mark.parametrize("start", [0, 1, 2, 7, 40, 90])
def test_pull_matches_function(start):
    seq = Fibonacci(start)
    pulled = [next(seq) for _ in range(3)]
    assert pulled == [fib(start + i) for i in range(3)]
    assert seq.index == start + 3


def test_u8_runs_until_overflow():
    assert list(Fibonacci(int_type=IntType.U8)) == [
        0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233,
    ]


def test_u16_runs_until_overflow():
    nums = list(Fibonacci(int_type="u16"))
    assert len(nums) == 25
    assert nums[-1] == 46368


@pytest.mark.parametrize("int_type", [t for t in IntType if t.bounded])
def test_last_value_is_max(int_type):
    max_n, max_value = max_index(int_type)
    nums = list(Fibonacci(int_type=int_type))
    assert len(nums) == max_n + 1
    assert nums[-1] == max_value


def test_exhaustion_is_final():
    seq = Fibonacci(12, int_type=IntType.U8)
    assert list(seq) == [144, 233]
    assert seq.exhausted
    for _ in range(3):
        with pytest.raises(StopIteration):
            next(seq)
    assert list(seq) == []


def test_start_at_max_index():
    assert list(Fibonacci(13, int_type=IntType.U8)) == [233]


def test_start_past_range_is_empty():
    seq = Fibonacci(14, int_type=IntType.U8)
    assert seq.exhausted
    assert list(seq) == []


def test_unbounded_keeps_going():
    seq = Fibonacci(int_type=IntType.UNBOUNDED)
    nums = list(islice(seq, 300))
    assert nums[-1] == fib(299, IntType.UNBOUNDED)
    assert not seq.exhausted


def test_copy_is_independent():
    seq = Fibonacci(5)
    next(seq)
    clone = seq.copy()
    assert next(seq) == 8
    assert next(seq) == 13
    assert next(clone) == 8
    assert clone.index == 7


def test_from_config():
    cfg = SequenceConfig(start_index=3, int_type=IntType.U8)
    seq = Fibonacci.from_config(cfg)
    assert seq.int_type is IntType.U8
    assert next(seq) == 2


def test_f_alias():
    assert Fibonacci.f(9) == 34
    assert Fibonacci.f(9) == list(islice(Fibonacci(), 10))[-1]


@pytest.mark.parametrize("bad", [-1, True, "x"])
def test_bad_start_index(bad):
    with pytest.raises(ValidationError):
        Fibonacci(bad)


def test_bad_int_type():
    with pytest.raises(ValidationError):
        Fibonacci(int_type="u7")


def test_repr():
    seq = Fibonacci(3, int_type=IntType.U8)
    assert repr(seq) == "Fibonacci(int_type='u8', index=3, current=2, following=3)"


def test_exhaustion_is_logged(caplog):
    with caplog.at_level("DEBUG", logger="fibs.sequence"):
        list(Fibonacci(int_type=IntType.I8))
    assert any("exhausted" in r.getMessage() for r in caplog.records)


def test_huge_start_index_is_empty():
    seq = Fibonacci(sys.maxsize)
    assert seq.exhausted
    assert seq.index == sys.maxsize
    with pytest.raises(StopIteration):
        next(seq)


def test_copy_of_exhausted_stays_exhausted():
    seq = Fibonacci(int_type=IntType.U8)
    list(seq)
    clone = seq.copy()
    assert clone.exhausted
    assert list(clone) == []
    assert clone.index == seq.index
