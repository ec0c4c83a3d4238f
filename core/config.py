# core/config.py
import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///livres_lieux.db")
JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Comma separated; "*" allows any origin
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
