from insurance_playground.schemas.common import QuoteParams, Quote, QuoteResponse, MessageResponse
from insurance_playground.schemas.auth import LoginInput, AdminLoginInput
from insurance_playground.schemas.customers import CustomerInput, AdminCustomerInput, CustomerUpdate, CustomerFilters
from insurance_playground.schemas.policies import (
    CoverageDetailInput, PolicyCreate, PolicyUpdate, PolicyStatusUpdate, UnderwritingUpdate, PolicyFilters
)
from insurance_playground.schemas.claims import ClaimCreate, ClaimStatusUpdate, ClaimFilters
from insurance_playground.schemas.brokers import BrokerInput, BrokerFilters
