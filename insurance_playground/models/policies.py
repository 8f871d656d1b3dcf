from datetime import date
from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Boolean, Numeric, ForeignKey
from insurance_playground.database import Base, utcnow


class Policy(Base):
    __tablename__ = "policies"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    policy_number = Column(String(30), unique=True, nullable=False)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    broker_id = Column(Integer, ForeignKey("brokers.id"), nullable=False, index=True)
    policy_type = Column(String(30), nullable=False)
    product_name = Column(String(255), nullable=False)
    coverage_amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    premium_amount = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    deductible = Column(Numeric(10, 2, asdecimal=False))
    policy_term = Column(Integer)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(String(20), default="pending")
    underwriting_status = Column(String(20), default="pending")
    risk_score = Column(Integer)
    notes = Column(Text)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class CoverageDetail(Base):
    __tablename__ = "coverage_details"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    policy_id = Column(Integer, ForeignKey("policies.id"), nullable=False, index=True)
    coverage_type = Column(String(100), nullable=False)
    coverage_limit = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    deductible = Column(Numeric(10, 2, asdecimal=False))
    premium_portion = Column(Numeric(10, 2, asdecimal=False))
    is_active = Column(Boolean, default=True)


class Claim(Base):
    __tablename__ = "claims"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    claim_number = Column(String(30), unique=True, nullable=False)
    policy_id = Column(Integer, ForeignKey("policies.id"), nullable=False, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    claim_type = Column(String(50), nullable=False)
    incident_date = Column(Date, nullable=False)
    reported_date = Column(Date, default=date.today)
    claim_amount = Column(Numeric(12, 2, asdecimal=False), nullable=False)
    approved_amount = Column(Numeric(12, 2, asdecimal=False), nullable=True)
    status = Column(String(20), default="submitted")
    priority = Column(String(20), default="medium")
    adjuster_id = Column(Integer, nullable=True)
    description = Column(Text, nullable=False)
    incident_location = Column(String(255))
    police_report_number = Column(String(100))
    witness_info = Column(Text)
    notes = Column(Text)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)


class ClaimDocument(Base):
    __tablename__ = "claim_documents"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    claim_id = Column(Integer, ForeignKey("claims.id"), nullable=False, index=True)
    document_type = Column(String(50), nullable=False)
    file_name = Column(String(255), nullable=False)
    file_path = Column(String(500))
    file_size = Column(Integer)
    uploaded_at = Column(DateTime, default=utcnow)
