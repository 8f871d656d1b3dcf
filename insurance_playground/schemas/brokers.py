from pydantic import BaseModel
from typing import Optional


class BrokerInput(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    license_number: Optional[str] = None
    company_name: Optional[str] = None
    commission_rate: Optional[float] = None
    territory: Optional[str] = None
    specialization: Optional[str] = None
    status: Optional[str] = None


class BrokerFilters(BaseModel):
    """Query parameters accepted by GET /brokers."""

    broker_code: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company_name: Optional[str] = None
    territory: Optional[str] = None
    specialization: Optional[str] = None
    status: Optional[str] = None
