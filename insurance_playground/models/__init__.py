from insurance_playground.models.customers import Agent, Broker, Customer, Admin
from insurance_playground.models.policies import Policy, CoverageDetail, Claim, ClaimDocument
