"""Tests for the query filter builder and parameter parsing."""

from datetime import date

import pytest
from sqlalchemy import select

from insurance_playground.models import Customer
from insurance_playground.services.errors import ValidationError
from insurance_playground.services.filters import (
    FilterSet, escape_like, is_blank, parse_date, parse_float, parse_int
)


class TestParsing:
    def test_blank_values(self):
        assert is_blank(None)
        assert is_blank("")
        assert is_blank("   ")
        assert not is_blank("0")

    def test_parse_float(self):
        assert parse_float("income_min", "50000") == 50000.0
        assert parse_float("income_min", "0") == 0.0
        assert parse_float("income_min", "") is None
        assert parse_float("income_min", None) is None

    @pytest.mark.parametrize("value", ["abc", "12abc", "nan", "inf"])
    def test_parse_float_rejects_malformed(self, value):
        with pytest.raises(ValidationError) as excinfo:
            parse_float("coverage_min", value)
        assert excinfo.value.status_code == 400
        assert "coverage_min" in excinfo.value.message

    def test_parse_int(self):
        assert parse_int("agent_id", " 3 ") == 3
        with pytest.raises(ValidationError):
            parse_int("agent_id", "3.5")

    def test_parse_date(self):
        assert parse_date("date_from", "2024-02-01") == date(2024, 2, 1)
        assert parse_date("date_from", None) is None
        with pytest.raises(ValidationError):
            parse_date("date_from", "02/01/2024")


class TestFilterSet:
    def test_blank_parameters_add_nothing(self):
        f = FilterSet()
        f.contains(Customer.first_name, "")
        f.equals(Customer.kyc_status, None)
        f.at_least(Customer.annual_income, None)
        assert len(f) == 0

        stmt = select(Customer.id)
        assert f.apply(stmt) is stmt

    def test_one_predicate_per_parameter(self):
        f = FilterSet()
        f.contains(Customer.first_name, "wiz")
        f.equals(Customer.kyc_status, "approved")
        f.at_least(Customer.annual_income, 0)
        f.at_most(Customer.annual_income, 100000)
        assert len(f) == 4

    def test_zero_is_a_real_bound(self):
        f = FilterSet().at_least(Customer.credit_score, 0)
        assert len(f) == 1

    def test_contains_any_is_a_single_predicate(self):
        f = FilterSet().contains_any([Customer.first_name, Customer.last_name, Customer.email], "wiz")
        assert len(f) == 1
        sql = str(f.apply(select(Customer.id)).compile())
        assert sql.count(" OR ") == 2

    def test_escape_like(self):
        assert escape_like("50%_off") == "50\\%\\_off"
        assert escape_like("a\\b") == "a\\\\b"
