"""Unit tests for BTW reporting periods"""

import pytest
from datetime import date
from src.domain.tax_period import tax_period_range


class TestTaxPeriodRange:
    def test_month(self):
        assert tax_period_range("month", 2024, 11) == (date(2024, 11, 1), date(2024, 11, 30))

    def test_february_of_leap_year(self):
        assert tax_period_range("month", 2024, 2).end_date == date(2024, 2, 29)

    def test_quarter(self):
        assert tax_period_range("quarter", 2024, 4) == (date(2024, 10, 1), date(2024, 12, 31))

    def test_year_ignores_value(self):
        assert tax_period_range("year", 2024, 7) == (date(2024, 1, 1), date(2024, 12, 31))

    @pytest.mark.parametrize(
        "period,year,value",
        [
            ("week", 2024, 1),
            ("month", 2024, 13),
            ("month", 2024, None),
            ("quarter", 2024, 0),
            ("quarter", 2024, 5),
            ("year", 1999, None),
            ("year", 2101, None),
        ],
    )
    def test_invalid(self, period, year, value):
        with pytest.raises(ValueError):
            tax_period_range(period, year, value)
