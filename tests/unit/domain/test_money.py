"""Unit tests for the money helper"""

from decimal import Decimal
from src.domain.money import MoneyLine, line_total, round_money, tax, to_decimal, totals, vat_breakdown


class TestRounding:
    def test_half_up_at_cent_boundary(self):
        assert round_money(Decimal("2.675")) == Decimal("2.68")
        assert round_money(Decimal("2.665")) == Decimal("2.67")

    def test_float_goes_through_string_form(self):
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(33.335) == Decimal("33.335")

    def test_int_and_str_inputs(self):
        assert to_decimal(3) == Decimal("3")
        assert to_decimal("19.99") == Decimal("19.99")


class TestLineTotal:
    def test_line_total_rounds_product(self):
        assert line_total(Decimal("2.5"), Decimal("19.99")) == Decimal("49.98")

    def test_line_total_exact(self):
        assert line_total(8, Decimal("75.00")) == Decimal("600.00")

    def test_zero_price(self):
        assert line_total(3, 0) == Decimal("0.00")


class TestTax:
    def test_default_rate_is_21_percent(self):
        assert tax(Decimal("600.00")) == Decimal("126.00")

    def test_tax_rounds_half_up(self):
        assert tax(Decimal("0.05")) == Decimal("0.01")
        assert tax(Decimal("0.02")) == Decimal("0.00")

    def test_custom_rate(self):
        assert tax(Decimal("100.00"), Decimal("0.09")) == Decimal("9.00")


class TestTotals:
    def test_rounding_determinism(self):
        """3 x 33.335 = 100.005 rounds up to 100.01 before tax"""
        result = totals([MoneyLine(3, 33.335)])

        assert result.subtotal == Decimal("100.01")
        assert result.tax == Decimal("21.00")
        assert result.total == Decimal("121.01")

    def test_lines_are_rounded_before_summing(self):
        lines = [MoneyLine(1, "0.005"), MoneyLine(1, "0.005")]

        result = totals(lines)

        assert result.subtotal == Decimal("0.02")

    def test_empty_lines(self):
        result = totals([])

        assert result.subtotal == Decimal("0.00")
        assert result.tax == Decimal("0.00")
        assert result.total == Decimal("0.00")

    def test_scenario_week_48(self):
        result = totals([MoneyLine(8, "75.00")])

        assert result.subtotal == Decimal("600.00")
        assert result.tax == Decimal("126.00")
        assert result.total == Decimal("726.00")

    def test_accepts_entities_with_quantity_and_unit_price(self, make_entry):
        entries = [make_entry("8", "75.00"), make_entry("1.5", "10.00", id="entry_2")]

        result = totals(entries)

        assert result.subtotal == Decimal("615.00")


class TestVatBreakdown:
    def test_splits_summed_amount(self):
        result = vat_breakdown(Decimal("700.01"))

        assert (result.subtotal, result.tax, result.total) == (
            Decimal("700.01"), Decimal("147.00"), Decimal("847.01")
        )

    def test_rounds_subtotal_first(self):
        assert vat_breakdown("100.005", Decimal("0.09")).subtotal == Decimal("100.01")
