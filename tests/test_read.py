import math
import sys

import pytest

import memoryfile
from memoryfile import EOF, InvalidArgumentError


def test_read_counts():
    f = memoryfile.open(b"hello")
    assert f.read(2, 10) == [b"he", b"llo"]
    assert f.read(1) == [EOF]


def test_short_read_then_eof_stops():
    f = memoryfile.open(b"abc")
    assert f.read(5, 5, "*a") == [b"abc", EOF]


def test_read_zero_signals_eof():
    f = memoryfile.open(b"ab")
    assert f.read(0) == [b""]
    assert f.tell() == 0

    f.seek("end")
    assert f.read(0) == [EOF]


def test_read_line():
    f = memoryfile.open(b"first\nsecond")
    assert f.read("*l") == [b"first"]
    assert f.tell() == 6
    assert f.read("*l") == [b"second"]
    assert f.read("*l") == [EOF]


def test_read_empty_lines():
    f = memoryfile.open(b"\n\nx")
    assert f.read("*l", "*l", "*l", "*l") == [b"", b"", b"x", EOF]


def test_read_defaults_to_line():
    f = memoryfile.open(b"a\nb")
    assert f.read() == [b"a"]
    assert f.read() == [b"b"]
    assert f.read() == [EOF]


def test_format_aliases():
    f = memoryfile.open(b"1\n2\n3\n4 rest")
    assert f.read("line", "*line", "l") == [b"1", b"2", b"3"]
    assert f.read("number", "all") == [4, b" rest"]


def test_read_all_is_idempotent_at_eof():
    f = memoryfile.open(b"abc")
    assert f.read("*a") == [b"abc"]
    assert f.read("*a") == [b""]
    assert f.read("*a") == [b""]
    assert f.read(1) == [EOF]
    assert f.read("*l") == [EOF]


def test_read_number_skips_whitespace():
    f = memoryfile.open(b"  12.5xyz")
    assert f.read("*n") == [12.5]
    assert f.tell() == 6
    assert f.read("*a") == [b"xyz"]


def test_read_several_numbers():
    f = memoryfile.open(b"42 -7\n3e2 +.5 1E-1")
    assert f.read("*n", "*n", "*n", "*n", "*n") == [42, -7, 300.0, 0.5, 0.1]


def test_integer_literals_read_as_int():
    result = memoryfile.open(b"17").read("*n")
    assert result == [17]
    assert isinstance(result[0], int)


def test_number_takes_longest_valid_prefix():
    f = memoryfile.open(b"1e+x")
    assert f.read("*n") == [1]
    assert f.read("*a") == [b"e+x"]


def test_number_failure_restores_cursor_and_stops():
    f = memoryfile.open(b"  abc")
    assert f.read("*n", "*a") == [EOF]
    assert f.tell() == 0


def test_number_failure_after_values():
    f = memoryfile.open(b"5 x 6")
    assert f.read("*n", "*n", "*n") == [5, EOF]
    assert f.tell() == 1


def test_number_at_eof():
    f = memoryfile.open(b"   ")
    assert f.read("*n") == [EOF]
    assert f.tell() == 0


@pytest.mark.parametrize("spec", [-1, True, 1.5, "*x", "", "*", None, b"*l"])
def test_invalid_format(spec):
    f = memoryfile.open(b"abc")
    with pytest.raises(InvalidArgumentError, match="invalid format"):
        f.read(spec)


def test_invalid_format_consumes_nothing():
    f = memoryfile.open(b"abc\ndef")
    with pytest.raises(InvalidArgumentError):
        f.read("*l", "bogus")
    assert f.tell() == 0


@pytest.mark.skipif(not hasattr(sys, "get_int_max_str_digits"),
                    reason="interpreter has no int digit limit")
def test_number_with_too_many_digits_reads_as_float():
    f = memoryfile.open(b"1" * 5000 + b" rest")
    assert f.read("*n") == [math.inf]
    assert f.tell() == 5000
    assert f.read("*a") == [b" rest"]
