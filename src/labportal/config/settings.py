# File location: src/labportal/config/settings.py
import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

# Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///labportal.db")

# Remote code execution (Piston API)
EXECUTION_API_URL = os.getenv("EXECUTION_API_URL", "https://emkc.org/api/v2/piston").rstrip("/")
EXECUTION_TIMEOUT_SEC = float(os.getenv("EXECUTION_TIMEOUT_SEC", "15"))

# Security settings
SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key-change-in-production")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))

# HTTP
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

if SECRET_KEY == "your-secret-key-change-in-production":
    logger.warning("SECRET_KEY is not set; using the development default.")
