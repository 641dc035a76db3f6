"""
Tests for hourly rate resolution and price -> work time conversion
"""
import pytest
from dataclasses import replace
from decimal import Decimal

from buybye.application.rates import resolve_hourly_rate, convert_price_to_work_time
from buybye.domain.savings import WorkTime
from buybye.utils.validation import InvalidInputError


class TestResolveHourlyRate:
    def test_salary_mode_divides_by_2080(self, salary_settings):
        """52 000 / 2080 = 25"""
        assert resolve_hourly_rate(salary_settings) == Decimal("25")

    def test_hourly_mode_uses_rate_directly(self, salary_settings):
        settings = replace(salary_settings, income_mode="hourly", hourly_rate=Decimal("30"))
        assert resolve_hourly_rate(settings) == Decimal("30")

    def test_custom_work_hours(self, salary_settings):
        assert resolve_hourly_rate(salary_settings, work_hours_per_year=2000) == Decimal("26")

    @pytest.mark.parametrize("hours", [0, -2080, 2080.5, True])
    def test_invalid_work_hours_rejected(self, salary_settings, hours):
        """Делитель <= 0 не должен приводить к DivisionByZero"""
        with pytest.raises(InvalidInputError, match="work_hours_per_year"):
            resolve_hourly_rate(salary_settings, work_hours_per_year=hours)

    def test_zero_salary_gives_zero_rate(self, salary_settings):
        settings = replace(salary_settings, yearly_salary=Decimal("0"))
        assert resolve_hourly_rate(settings) == 0


class TestConvertPriceToWorkTime:
    def test_exact_hours(self):
        assert convert_price_to_work_time(100, 25) == WorkTime(4, 0)

    def test_fractional_hour_rounds_minutes(self):
        """10 / 7 = 1.428h -> 1h 26m"""
        assert convert_price_to_work_time(10, 7) == WorkTime(1, 26)

    def test_minutes_rounding_to_60_carries(self):
        """1.9999h -> 59.994 минут округляются до 60 -> 2h 0m"""
        assert convert_price_to_work_time("19.999", 10) == WorkTime(2, 0)

    def test_half_minute_rounds_up(self):
        """1 / 40 = 0.025h = 1.5 минуты -> 2 минуты (half-up)"""
        assert convert_price_to_work_time(1, 40) == WorkTime(0, 2)

    @pytest.mark.parametrize("rate", [0, -10, "0"])
    def test_non_positive_rate_gives_zero(self, rate):
        assert convert_price_to_work_time(100, rate) == WorkTime(0, 0)

    def test_zero_price(self):
        assert convert_price_to_work_time(0, 25) == WorkTime(0, 0)

    def test_negative_price_rejected(self):
        with pytest.raises(InvalidInputError):
            convert_price_to_work_time(-1, 25)

    @pytest.mark.parametrize("price,rate", [
        (100, 25), (10, 7), (3.33, 17), (999.99, 41.5), (1, 3), (0.01, 1000), (12345, 12.34),
    ])
    def test_within_one_minute_of_exact(self, price, rate):
        """hours*60+minutes отличается от price/rate*60 не больше чем на минуту"""
        wt = convert_price_to_work_time(price, rate)
        exact = Decimal(str(price)) / Decimal(str(rate)) * 60

        assert 0 <= wt.minutes < 60
        assert abs(Decimal(wt.total_minutes) - exact) <= 1

    def test_is_deterministic(self):
        assert convert_price_to_work_time(57.3, 19) == convert_price_to_work_time(57.3, 19)
