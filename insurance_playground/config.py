import os
from dotenv import load_dotenv

load_dotenv()

# Database
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./data/insurance.db")
DB_BUSY_TIMEOUT = float(os.environ.get("DB_BUSY_TIMEOUT", "30"))
SQL_ECHO = os.environ.get("SQL_ECHO", "false").lower() == "true"

# Seed fixture data when the server starts
SEED_ON_STARTUP = os.environ.get("SEED_ON_STARTUP", "true").lower() == "true"

# Password hashing cost
BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", "12"))

# Server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]
