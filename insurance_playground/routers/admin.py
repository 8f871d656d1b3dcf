from fastapi import APIRouter, Depends

from insurance_playground.database import Database, get_db
from insurance_playground.schemas.auth import AdminLoginInput
from insurance_playground.schemas.customers import AdminCustomerInput, CustomerUpdate
from insurance_playground.schemas.common import MessageResponse
from insurance_playground.services import customers
from insurance_playground.services.auth import authenticate_admin
from insurance_playground.services.errors import failure_message
from insurance_playground.services.seed import reset_database

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/login")
def admin_login(input: AdminLoginInput, db: Database = Depends(get_db)):
    with failure_message("Login failed"):
        data = authenticate_admin(db, input.username, input.password)
    return {"success": True, "data": data, "message": "Admin login successful"}


@router.post("/reset-database", response_model=MessageResponse)
def reset(db: Database = Depends(get_db)):
    """Wipe every table and reload the sample data"""
    with failure_message("Failed to reset database"):
        return reset_database(db)


@router.get("/customers")
def list_customers(db: Database = Depends(get_db)):
    """All customers with their agent and policy/claim counts"""
    with failure_message("Failed to fetch customers"):
        rows = customers.list_customers_with_counts(db)
    return {"success": True, "data": rows, "count": len(rows)}


@router.post("/customers", status_code=201)
def create_customer(input: AdminCustomerInput, db: Database = Depends(get_db)):
    with failure_message("Failed to create customer"):
        customer = customers.create_customer(
            db, input, conflict_message="Customer with this email already exists"
        )
    return {"success": True, "data": customer, "message": "Customer created successfully"}


@router.put("/customers/{customer_id}")
def update_customer(customer_id: int, input: CustomerUpdate, db: Database = Depends(get_db)):
    with failure_message("Failed to update customer"):
        customer = customers.update_customer(db, customer_id, input)
    return {"success": True, "data": customer, "message": "Customer updated successfully"}


@router.delete("/customers/{customer_id}")
def delete_customer(customer_id: int, db: Database = Depends(get_db)):
    with failure_message("Failed to delete customer"):
        customers.delete_customer(db, customer_id)
    return {"success": True, "message": "Customer deleted successfully"}
