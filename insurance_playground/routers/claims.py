from typing import Optional

from fastapi import APIRouter, Depends

from insurance_playground.database import Database, get_db
from insurance_playground.schemas.claims import ClaimCreate, ClaimStatusUpdate, ClaimFilters
from insurance_playground.services import claims as service
from insurance_playground.services.errors import failure_message

router = APIRouter(prefix="/api", tags=["claims"])


@router.get("/claims")
def list_claims(filters: ClaimFilters = Depends(), db: Database = Depends(get_db)):
    """List claims with customer and policy summary"""
    with failure_message("Failed to fetch claims"):
        rows = service.list_claims(db, filters)
    return {"success": True, "data": rows, "count": len(rows)}


@router.get("/claims/search")
def search_claims(q: Optional[str] = None, db: Database = Depends(get_db)):
    with failure_message("Claim search failed"):
        rows = service.search_claims(db, q)
    return {"success": True, "data": rows, "count": len(rows), "query": q}


@router.get("/claims/{claim_id}")
def get_claim(claim_id: int, db: Database = Depends(get_db)):
    with failure_message("Failed to fetch claim"):
        claim = service.get_claim(db, claim_id)
    return {"success": True, "data": claim}


@router.post("/claims", status_code=201)
def submit_claim(input: ClaimCreate, db: Database = Depends(get_db)):
    """Submit a claim against one of the customer's policies"""
    with failure_message("Failed to submit claim"):
        claim = service.create_claim(db, input)
    return {"success": True, "data": claim, "message": "Claim submitted successfully"}


@router.put("/claims/{claim_id}/status")
def update_claim_status(claim_id: int, input: ClaimStatusUpdate, db: Database = Depends(get_db)):
    with failure_message("Failed to update claim status"):
        claim = service.update_claim_status(db, claim_id, input)
    return {"success": True, "data": claim, "message": "Claim status updated successfully"}
