from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from insurance_playground.database import Database, get_db
from insurance_playground.schemas.common import QuoteParams, QuoteResponse
from insurance_playground.services.brokers import list_active_agents
from insurance_playground.services.errors import failure_message
from insurance_playground.services.quotes import generate_quote

router = APIRouter(prefix="/api", tags=["reference"])


@router.get("/health")
def health():
    return {
        "status": "OK",
        "message": "Insurance Playground API is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/agents")
def get_agents(db: Database = Depends(get_db)):
    """Active agents, by name"""
    with failure_message("Failed to fetch agents"):
        rows = list_active_agents(db)
    return {"success": True, "data": rows, "count": len(rows)}


@router.get("/quotes", response_model=QuoteResponse)
def get_quote(params: QuoteParams = Depends()):
    """Estimate a premium without creating any record"""
    with failure_message("Failed to generate quote"):
        quote = generate_quote(params)
    return QuoteResponse(success=True, data=quote)
