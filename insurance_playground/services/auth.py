import secrets
import logging
from typing import Optional

import bcrypt
from sqlalchemy import select

from insurance_playground import config
from insurance_playground.database import Database
from insurance_playground.models import Customer, Admin
from insurance_playground.services.errors import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)

CUSTOMER_LOGIN_FIELDS = ("id", "customer_number", "email", "first_name", "last_name", "kyc_status")
ADMIN_PROFILE_FIELDS = ("id", "username", "email", "first_name", "last_name", "role", "is_super_admin")

# bcrypt only reads the first 72 bytes; newer releases refuse anything longer
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt(rounds=config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash"""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def generate_session_token() -> str:
    """Generate a secure random session token"""
    return secrets.token_urlsafe(32)


def normalize_email(email: str) -> str:
    return email.lower().strip()


def authenticate_customer(db: Database, email: Optional[str], password: Optional[str]) -> dict:
    """Check customer credentials and return the login payload."""
    if not email or not password:
        raise ValidationError("Email and password are required")

    row = db.fetch_one(select(Customer.__table__).where(Customer.email == normalize_email(email)))
    if not row or not verify_password(password, row["password"]):
        logger.info("Failed customer login for %s", email)
        raise AuthenticationError("Invalid email or password")

    customer = {field: row[field] for field in CUSTOMER_LOGIN_FIELDS}
    return {"customer": customer, "token": generate_session_token()}


def authenticate_admin(db: Database, username: Optional[str], password: Optional[str]) -> dict:
    """Check admin credentials; only active admins may log in."""
    if not username or not password:
        raise ValidationError("Username and password are required")

    row = db.fetch_one(
        select(Admin.__table__).where(Admin.username == username.strip(), Admin.is_active.is_(True))
    )
    if not row or not verify_password(password, row["password"]):
        logger.info("Failed admin login for %s", username)
        raise AuthenticationError("Invalid credentials")

    admin = {field: row[field] for field in ADMIN_PROFILE_FIELDS}
    return {"admin": admin, "token": generate_session_token()}
