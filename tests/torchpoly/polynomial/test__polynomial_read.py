"""Tests for polynomial text input."""

import io

import pytest
import torch

from torchpoly.polynomial import (
    SENTINEL,
    CoefficientOverflowError,
    Polynomial,
    TokenReader,
    TruncatedInputError,
    polynomial_format,
    polynomial_from_coefficients,
    polynomial_parse,
    polynomial_read,
)


class TestPolynomialRead:
    """Tests for polynomial_read() and polynomial_parse()."""

    def test_read_pairs(self):
        """Pairs are applied until the terminator."""
        p = polynomial_read("3 2 -1 1 5 0 -1 -1")
        assert p.coeffs.tolist() == [5, -1, 3]
        assert polynomial_format(p) == " +3x^2 -1x +5"

    def test_sentinel(self):
        """Terminator is the pair (-1, -1)."""
        assert SENTINEL == (-1, -1)

    def test_empty_input(self):
        """Terminator alone gives the default polynomial."""
        p = polynomial_parse("-1 -1")
        assert p == Polynomial()

    def test_terminator_not_stored(self):
        """Terminator does not grow or modify the polynomial."""
        p = polynomial_parse("4 1 -1 -1")
        assert p.max_exponent == 1
        assert p.coeffs.tolist() == [0, 4]

    def test_coefficient_minus_one(self):
        """-1 as a coefficient alone is not the terminator."""
        p = polynomial_parse("-1 2 -1 -1")
        assert p.coeffs.tolist() == [0, 0, -1]

    def test_exponent_minus_one_ignored(self):
        """A pair with exponent -1 and another coefficient is ignored."""
        p = polynomial_parse("5 -1 2 0 -1 -1")
        assert p.coeffs.tolist() == [2]

    def test_later_pair_overwrites(self):
        """Repeated exponents keep the last coefficient."""
        p = polynomial_parse("3 1 8 1 -1 -1")
        assert p.coeffs.tolist() == [0, 8]

    def test_zero_pair_grows(self):
        """A zero coefficient still extends the stored degree."""
        p = polynomial_parse("0 4 -1 -1")
        assert p.max_exponent == 4
        assert polynomial_format(p) == " 0"

    def test_multiline(self):
        """Tokens may span lines."""
        p = polynomial_read(io.StringIO("3\n2\n\n-1 -1\n"))
        assert p.coeffs.tolist() == [0, 0, 3]

    def test_iterable_of_lines(self):
        """Any iterable of lines is a source."""
        p = polynomial_read(["1 0", "2 1", "-1 -1"])
        assert p.coeffs.tolist() == [1, 2]

    def test_read_into_existing(self):
        """Reading into a polynomial keeps its other coefficients."""
        p = polynomial_from_coefficients([1, 1])
        result = polynomial_read("5 3 -1 -1", p)
        assert result is p
        assert p.coeffs.tolist() == [1, 1, 0, 5]

    def test_trailing_tokens_ignored(self):
        """Tokens after the terminator are not consumed by parse."""
        p = polynomial_parse("2 0 -1 -1 9 9")
        assert p.coeffs.tolist() == [2]

    def test_missing_terminator_raises(self):
        """Input ending before the terminator raises."""
        with pytest.raises(TruncatedInputError):
            polynomial_parse("3 2 5 0")

    def test_odd_token_count_raises(self):
        """A dangling coefficient raises."""
        with pytest.raises(TruncatedInputError):
            polynomial_parse("3 2 5")

    def test_truncated_is_eof_error(self):
        """Truncated input is also an EOFError."""
        with pytest.raises(EOFError):
            polynomial_parse("")

    def test_non_integer_token_raises(self):
        """Malformed tokens raise ValueError from int()."""
        with pytest.raises(ValueError):
            polynomial_parse("3 x -1 -1")

    def test_failed_read_leaves_target_unchanged(self):
        """Polynomial is untouched if reading fails."""
        p = polynomial_from_coefficients([1, 2])
        with pytest.raises(TruncatedInputError):
            polynomial_read("7 5 8", p)
        assert p.coeffs.tolist() == [1, 2]

    def test_overflow_leaves_target_unchanged(self):
        """Out-of-range coefficient raises without modifying the target."""
        p = polynomial_from_coefficients([1], dtype=torch.int8)
        with pytest.raises(CoefficientOverflowError):
            polynomial_read("3 1 500 0 -1 -1", p)
        assert p.coeffs.tolist() == [1]


class TestTokenReader:
    """Tests for TokenReader."""

    def test_sequential_reads(self):
        """Several polynomials can be read from one source."""
        reader = TokenReader("3 2 -1 -1 4 0\n-1 -1\n")
        first = polynomial_read(reader)
        second = polynomial_read(reader)
        assert first.coeffs.tolist() == [0, 0, 3]
        assert second.coeffs.tolist() == [4]

    def test_stream_consumed_lazily(self):
        """Lines after the terminator are left in the stream."""
        stream = io.StringIO("1 0 -1 -1\n2 0 -1 -1\n")
        polynomial_read(TokenReader(stream))
        assert stream.readline() == "2 0 -1 -1\n"

    def test_two_polynomials_one_stream_line(self):
        """Bare stream keeps the tokens after the terminator."""
        stream = io.StringIO("3 2 -1 -1 4 0 -1 -1\n")
        first = polynomial_read(stream)
        second = polynomial_read(stream)
        assert first.coeffs.tolist() == [0, 0, 3]
        assert second.coeffs.tolist() == [4]

    def test_stream_stops_at_terminator(self):
        """Only the terminator and its delimiter are consumed."""
        stream = io.StringIO("1 0 -1 -1 rest of line\n")
        polynomial_read(stream)
        assert stream.read() == "rest of line\n"

    def test_line_reader_reuse(self):
        """A reader over lines keeps buffered tokens between reads."""
        reader = TokenReader(["5 1 -1 -1 6 0", "-1 -1"])
        assert polynomial_read(reader).coeffs.tolist() == [0, 5]
        assert polynomial_read(reader).coeffs.tolist() == [6]

    def test_read_int(self):
        """read_int parses signed integers."""
        reader = TokenReader("  -12 +3\n")
        assert reader.read_int() == -12
        assert reader.read_int() == 3

    def test_read_int_exhausted(self):
        """Exhausted reader raises TruncatedInputError."""
        reader = TokenReader("")
        with pytest.raises(TruncatedInputError):
            reader.read_int()

    def test_iteration(self):
        """Reader iterates over tokens."""
        assert list(TokenReader("1 2\n 3")) == ["1", "2", "3"]
