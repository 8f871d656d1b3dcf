from fastapi import APIRouter, Depends

from insurance_playground.database import Database, get_db
from insurance_playground.schemas.auth import LoginInput
from insurance_playground.services.auth import authenticate_customer
from insurance_playground.services.errors import failure_message

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/auth/login")
def login(input: LoginInput, db: Database = Depends(get_db)):
    """Log in a customer by email and password"""
    with failure_message("Login failed"):
        data = authenticate_customer(db, input.email, input.password)
    return {"success": True, "data": data, "message": "Login successful"}
