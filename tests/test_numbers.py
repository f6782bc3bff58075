"""Tests for NumberCheck."""

from decimal import Decimal

from checkvalidators import NumberCheck, check


class TestSign:
    """Test sign checks."""

    def test_if_negative(self):
        assert check(-1).if_negative().get_errors() == ["The number is negative"]
        assert check(0).if_negative().is_valid()

    def test_if_positive(self):
        assert check(1.5).if_positive().get_errors() == ["The number is positive"]
        assert check(0).if_positive().is_valid()

    def test_zero(self):
        assert check(0).if_zero().get_errors() == ["The number is zero"]
        assert check(3).if_not_zero().get_errors() == ["The number is not zero"]
        assert check(0.0).if_not_zero().is_valid()


class TestComparison:
    """Test comparison checks."""

    def test_greater_and_less(self):
        assert check(11).if_greater_than(10).get_errors() == ["The number is greater than 10"]
        assert check(9).if_less_than(10).get_errors() == ["The number is less than 10"]
        assert check(10).if_greater_than(10).if_less_than(10).is_valid()

    def test_equals(self):
        assert check(7).if_equals(7).get_errors() == ["The number should not be 7"]
        assert check(7).if_not_equals(8).get_errors() == ["The number should be 8"]

    def test_decimal(self):
        assert check(Decimal("0.10")).if_greater_than(Decimal("0.05")).error_count() == 1


class TestRanges:
    """Test range checks."""

    def test_if_between_is_exclusive(self):
        assert check(5).if_between(1, 10).get_errors() == [
            "The number '5' is between '1' and '10'"
        ]
        assert check(1).if_between(1, 10).is_valid()

    def test_if_not_between_is_inclusive(self):
        assert check(1).if_not_between(1, 10).is_valid()
        assert check(10).if_not_between(1, 10).is_valid()
        assert check(11).if_not_between(1, 10).get_errors() == [
            "The number '11' is not between '1' and '10'"
        ]

    def test_if_between_or_equal(self):
        assert check(10).if_between_or_equal(1, 10).get_errors() == [
            "The number '10' is between or equal to '1' and '10'"
        ]
        assert check(11).if_between_or_equal(1, 10).is_valid()


class TestGatingWithCatalog:
    """Catalog checks take part in the gate."""

    def test_failed_catalog_check_closes_gate(self):
        c = check(-5).if_negative().and_if(lambda x: True, "skipped").or_if(lambda x: True, "ran")
        assert c.get_errors() == ["The number is negative", "ran"]

    def test_none_number(self):
        assert NumberCheck(None).if_negative().if_zero().error_count() == 0


class TestUnorderedValues:
    """NaN makes ordering checks pass instead of raising."""

    def test_decimal_nan(self):
        nan = Decimal("NaN")
        c = (
            check(nan)
            .if_negative()
            .if_positive()
            .if_greater_than(1)
            .if_less_than(1)
            .if_between(0, 10)
            .if_not_between(0, 10)
            .if_between_or_equal(0, 10)
        )
        assert c.is_valid()

    def test_float_nan(self):
        assert check(float("nan")).if_negative().if_between(0, 10).is_valid()

    def test_incomparable_bound(self):
        assert check(5).if_greater_than("x").is_valid()

    def test_complex_gets_plain_check(self):
        c = check(1j).if_(lambda x: x.imag == 1, "imaginary")
        assert not hasattr(c, "if_negative")
        assert c.get_errors() == ["imaginary"]
