from pydantic import BaseModel
from typing import Optional


class LoginInput(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class AdminLoginInput(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
