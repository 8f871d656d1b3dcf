from pydantic import BaseModel
from typing import Optional


class QuoteParams(BaseModel):
    policy_type: Optional[str] = None
    coverage_amount: Optional[str] = None
    customer_age: Optional[str] = None


class Quote(BaseModel):
    policy_type: Optional[str] = None
    coverage_amount: float
    estimated_premium: float
    quote_id: str
    valid_until: str


class QuoteResponse(BaseModel):
    success: bool
    data: Quote


class MessageResponse(BaseModel):
    success: bool
    message: str
    timestamp: Optional[str] = None
