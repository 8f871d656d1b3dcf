from datetime import date
from pydantic import BaseModel
from typing import Optional


class CoverageDetailInput(BaseModel):
    coverage_type: Optional[str] = None
    coverage_limit: Optional[float] = None
    deductible: Optional[float] = None
    premium_portion: Optional[float] = None


class PolicyUpdate(BaseModel):
    policy_type: Optional[str] = None
    product_name: Optional[str] = None
    coverage_amount: Optional[float] = None
    premium_amount: Optional[float] = None
    deductible: Optional[float] = None
    policy_term: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    notes: Optional[str] = None


class PolicyCreate(PolicyUpdate):
    customer_id: Optional[int] = None
    broker_id: Optional[int] = None
    coverage_details: Optional[list[CoverageDetailInput]] = None


class PolicyStatusUpdate(BaseModel):
    status: Optional[str] = None
    notes: Optional[str] = None


class UnderwritingUpdate(BaseModel):
    underwriting_status: Optional[str] = None
    risk_score: Optional[int] = None
    notes: Optional[str] = None


class PolicyFilters(BaseModel):
    """Query parameters accepted by GET /policies."""

    customer_id: Optional[str] = None
    broker_id: Optional[str] = None
    policy_type: Optional[str] = None
    status: Optional[str] = None
    underwriting_status: Optional[str] = None
    policy_number: Optional[str] = None
    customer_name: Optional[str] = None
    product_name: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    coverage_min: Optional[str] = None
    coverage_max: Optional[str] = None
