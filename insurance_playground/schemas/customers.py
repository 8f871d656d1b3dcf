from datetime import date
from pydantic import BaseModel, ConfigDict
from typing import Optional


class CustomerInput(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    ssn: Optional[str] = None
    employment_status: Optional[str] = None
    annual_income: Optional[float] = None
    customer_type: Optional[str] = "individual"


class AdminCustomerInput(CustomerInput):
    credit_score: Optional[int] = None
    kyc_status: Optional[str] = "pending"
    agent_id: Optional[int] = None


class CustomerUpdate(BaseModel):
    """Partial update; only fields present in the request are written."""

    model_config = ConfigDict(extra="forbid")

    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    ssn: Optional[str] = None
    employment_status: Optional[str] = None
    annual_income: Optional[float] = None
    credit_score: Optional[int] = None
    kyc_status: Optional[str] = None
    customer_type: Optional[str] = None
    agent_id: Optional[int] = None


class CustomerFilters(BaseModel):
    """Query parameters accepted by GET /customers. Parsed by the service."""

    customer_number: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    agent_id: Optional[str] = None
    income_min: Optional[str] = None
    income_max: Optional[str] = None
    age_min: Optional[str] = None
    age_max: Optional[str] = None
    credit_min: Optional[str] = None
    registration_from: Optional[str] = None
    customer_status: Optional[str] = None
    customer_type: Optional[str] = None
