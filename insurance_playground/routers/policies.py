from typing import Optional

from fastapi import APIRouter, Depends

from insurance_playground.database import Database, get_db
from insurance_playground.schemas.policies import (
    PolicyCreate, PolicyUpdate, PolicyStatusUpdate, UnderwritingUpdate, PolicyFilters
)
from insurance_playground.services import policies as service
from insurance_playground.services.errors import failure_message

router = APIRouter(prefix="/api", tags=["policies"])


@router.get("/policies")
def list_policies(filters: PolicyFilters = Depends(), db: Database = Depends(get_db)):
    """List policies with customer and broker names"""
    with failure_message("Failed to fetch policies"):
        rows = service.list_policies(db, filters)
    return {"success": True, "data": rows, "count": len(rows)}


@router.get("/policies/search")
def search_policies(q: Optional[str] = None, db: Database = Depends(get_db)):
    with failure_message("Policy search failed"):
        rows = service.search_policies(db, q)
    return {"success": True, "data": rows, "count": len(rows), "query": q}


@router.get("/policies/{policy_id}")
def get_policy(policy_id: int, db: Database = Depends(get_db)):
    """Get a policy with its coverage details"""
    with failure_message("Failed to fetch policy"):
        policy = service.get_policy(db, policy_id)
    return {"success": True, "data": policy}


@router.post("/policies", status_code=201)
def create_policy(input: PolicyCreate, db: Database = Depends(get_db)):
    with failure_message("Failed to create policy"):
        policy = service.create_policy(db, input)
    return {"success": True, "data": policy, "message": "Policy created successfully"}


@router.put("/policies/{policy_id}")
def update_policy(policy_id: int, input: PolicyUpdate, db: Database = Depends(get_db)):
    with failure_message("Failed to update policy"):
        policy = service.update_policy(db, policy_id, input)
    return {"success": True, "data": policy, "message": "Policy updated successfully"}


@router.put("/policies/{policy_id}/status")
def update_policy_status(policy_id: int, input: PolicyStatusUpdate, db: Database = Depends(get_db)):
    with failure_message("Failed to update policy status"):
        policy = service.update_policy_status(db, policy_id, input)
    return {"success": True, "data": policy, "message": "Policy status updated successfully"}


@router.put("/policies/{policy_id}/underwriting")
def update_underwriting(policy_id: int, input: UnderwritingUpdate, db: Database = Depends(get_db)):
    """Record an underwriting decision; approval activates the policy"""
    with failure_message("Failed to update policy underwriting"):
        policy = service.update_underwriting(db, policy_id, input)
    return {"success": True, "data": policy, "message": "Policy underwriting updated successfully"}


@router.delete("/policies/{policy_id}")
def delete_policy(policy_id: int, db: Database = Depends(get_db)):
    with failure_message("Failed to delete policy"):
        service.delete_policy(db, policy_id)
    return {"success": True, "message": "Policy deleted successfully"}
