from typing import Optional

from fastapi import APIRouter, Depends

from insurance_playground.database import Database, get_db
from insurance_playground.schemas.customers import CustomerInput, CustomerFilters
from insurance_playground.services import customers as service
from insurance_playground.services.errors import failure_message

router = APIRouter(prefix="/api", tags=["customers"])


@router.get("/customers")
def list_customers(filters: CustomerFilters = Depends(), db: Database = Depends(get_db)):
    """List customers matching every supplied filter"""
    with failure_message("Failed to fetch customers"):
        rows = service.list_customers(db, filters)
    return {"success": True, "data": rows, "count": len(rows)}


@router.get("/customers/search")
def search_customers(q: Optional[str] = None, db: Database = Depends(get_db)):
    """Quick search over number, name, email and phone"""
    with failure_message("Customer search failed"):
        rows = service.search_customers(db, q)
    return {"success": True, "data": rows, "count": len(rows), "query": q}


@router.get("/customers/{customer_id}")
def get_customer(customer_id: int, db: Database = Depends(get_db)):
    """Get a customer with their policies and claims"""
    with failure_message("Failed to fetch customer"):
        customer = service.get_customer(db, customer_id)
    return {"success": True, "data": customer}


@router.post("/customers", status_code=201)
def register_customer(input: CustomerInput, db: Database = Depends(get_db)):
    """Register a new customer"""
    with failure_message("Failed to register customer"):
        customer = service.create_customer(db, input)
    return {"success": True, "data": customer, "message": "Customer registered successfully"}
