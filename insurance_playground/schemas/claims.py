from datetime import date
from pydantic import BaseModel
from typing import Optional


class ClaimCreate(BaseModel):
    policy_id: Optional[int] = None
    customer_id: Optional[int] = None
    claim_type: Optional[str] = None
    incident_date: Optional[date] = None
    claim_amount: Optional[float] = None
    description: Optional[str] = None
    incident_location: Optional[str] = None
    police_report_number: Optional[str] = None
    witness_info: Optional[str] = None
    priority: Optional[str] = None


class ClaimStatusUpdate(BaseModel):
    status: Optional[str] = None
    approved_amount: Optional[float] = None
    notes: Optional[str] = None


class ClaimFilters(BaseModel):
    """Query parameters accepted by GET /claims."""

    customer_id: Optional[str] = None
    policy_id: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    claim_type: Optional[str] = None
    claim_number: Optional[str] = None
    customer_name: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    amount_min: Optional[str] = None
    amount_max: Optional[str] = None
