from typing import Optional

from fastapi import APIRouter, Depends

from insurance_playground.database import Database, get_db
from insurance_playground.schemas.brokers import BrokerInput, BrokerFilters
from insurance_playground.services import brokers as service
from insurance_playground.services.errors import failure_message

router = APIRouter(prefix="/api", tags=["brokers"])


@router.get("/brokers")
def list_brokers(filters: BrokerFilters = Depends(), db: Database = Depends(get_db)):
    with failure_message("Failed to fetch brokers"):
        rows = service.list_brokers(db, filters)
    return {"success": True, "data": rows, "count": len(rows)}


@router.get("/brokers/search")
def search_brokers(q: Optional[str] = None, db: Database = Depends(get_db)):
    with failure_message("Failed to search brokers"):
        rows = service.search_brokers(db, q)
    return {"success": True, "data": rows, "count": len(rows), "query": q}


@router.get("/brokers/{broker_id}")
def get_broker(broker_id: int, db: Database = Depends(get_db)):
    with failure_message("Failed to fetch broker"):
        broker = service.get_broker(db, broker_id)
    return {"success": True, "data": broker}


@router.post("/brokers", status_code=201)
def create_broker(input: BrokerInput, db: Database = Depends(get_db)):
    with failure_message("Failed to create broker"):
        broker = service.create_broker(db, input)
    return {"success": True, "data": broker, "message": "Broker created successfully"}


@router.put("/brokers/{broker_id}")
def update_broker(broker_id: int, input: BrokerInput, db: Database = Depends(get_db)):
    with failure_message("Failed to update broker"):
        broker = service.update_broker(db, broker_id, input)
    return {"success": True, "data": broker, "message": "Broker updated successfully"}


@router.delete("/brokers/{broker_id}")
def delete_broker(broker_id: int, db: Database = Depends(get_db)):
    """Delete a broker that no policy references"""
    with failure_message("Failed to delete broker"):
        service.delete_broker(db, broker_id)
    return {"success": True, "message": "Broker deleted successfully"}
