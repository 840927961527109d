from dotenv import load_dotenv
import os
from urllib.parse import quote_plus

# Load environment variables from .env file
load_dotenv()

# Database configuration
DB_USER = os.getenv("DB_USER", "")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_HOST = os.getenv("DB_HOST", "cluster0.uoehazd.mongodb.net")
DB_NAME = os.getenv("DB_NAME", "stayVista-24-Db")

# Token configuration
SECRET_KEY = os.getenv("ACCESS_TOKEN_SECRET", "your_secret_key_here")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_DAYS = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "365"))
TOKEN_COOKIE_NAME = "token"

# Payment provider
PAYMENT_SECRET_KEY = os.getenv("PAYMENT_SECRET_KEY", "")
PAYMENT_CURRENCY = "usd"

# Application configuration
APP_ENV = os.getenv("APP_ENV", "development")
PRODUCTION = APP_ENV.lower() == "production"
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS", "http://localhost:5173,http://localhost:5174"
    ).split(",")
    if origin.strip()
]

# Database URL
def build_mongo_uri(user: str, password: str, host: str) -> str:
    # Userinfo must be percent-escaped or pymongo rejects the URI
    credentials = f"{quote_plus(user)}:{quote_plus(password)}@" if user else ""
    return f"mongodb+srv://{credentials}{host}/?retryWrites=true&w=majority"


MONGO_URI = os.getenv("MONGO_URI", build_mongo_uri(DB_USER, DB_PASSWORD, DB_HOST))


def cookie_options(production: bool = PRODUCTION) -> dict:
    """Attributes shared by the token cookie when it is set and when it is cleared."""
    return {
        "httponly": True,
        "secure": production,
        "samesite": "none" if production else "strict",
    }
