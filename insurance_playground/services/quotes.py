import math
from datetime import datetime, timedelta, timezone

from insurance_playground.schemas.common import QuoteParams
from insurance_playground.services.errors import ValidationError
from insurance_playground.services.filters import parse_float
from insurance_playground.services.numbers import record_numbers

DEFAULT_BASE_RATE = 100
BASE_RATES = {
    "auto": 150,
    "home": 120,
    "life": 80,
}

REFERENCE_COVERAGE = 100000
REFERENCE_AGE = 30
AGE_LOADING_PER_YEAR = 0.01
QUOTE_VALID_DAYS = 30


def estimate_premium(policy_type: str, coverage_amount: float, customer_age: float = None) -> float:
    """Premium estimate: base rate scaled by sqrt(coverage / 100k) and a linear age loading."""
    base_rate = BASE_RATES.get(policy_type, DEFAULT_BASE_RATE)
    coverage_multiplier = math.sqrt(coverage_amount / REFERENCE_COVERAGE)
    age_multiplier = 1.0
    if customer_age is not None:
        age_multiplier = 1 + (customer_age - REFERENCE_AGE) * AGE_LOADING_PER_YEAR
    return round(base_rate * coverage_multiplier * age_multiplier, 2)


def generate_quote(params: QuoteParams) -> dict:
    """Build a quote; nothing is persisted."""
    coverage_amount = parse_float("coverage_amount", params.coverage_amount)
    if coverage_amount is None:
        raise ValidationError("coverage_amount is required")
    if coverage_amount <= 0:
        raise ValidationError("coverage_amount must be greater than zero")

    customer_age = parse_float("customer_age", params.customer_age)
    if customer_age is not None and customer_age < 0:
        raise ValidationError("customer_age cannot be negative")

    valid_until = datetime.now(timezone.utc) + timedelta(days=QUOTE_VALID_DAYS)
    return {
        "policy_type": params.policy_type,
        "coverage_amount": coverage_amount,
        "estimated_premium": estimate_premium(params.policy_type, coverage_amount, customer_age),
        "quote_id": record_numbers.quote_id(),
        "valid_until": valid_until.isoformat(),
    }
