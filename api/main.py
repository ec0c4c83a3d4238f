# api/main.py
import logging
import time
from fastapi import FastAPI, Depends, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core import config
from core.sa.database import db, get_db
from api.errors import register_error_handlers
from api.routes import books, lists, places

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Livres & Lieux API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials="*" not in config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    message = f"{request.method} {request.url.path}"
    if request.method == "GET" and request.query_params:
        message += f" | Query: {dict(request.query_params)}"

    response = await call_next(request)

    duration_ms = (time.perf_counter() - start) * 1000
    logger.info("%s | %s | %.1fms", message, response.status_code, duration_ms)
    return response

# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    db.init_db()

@app.get("/")
async def root():
    return {
        "name": "Livres & Lieux API",
        "endpoints": {
            "health": "/health",
            "books": "/api/books",
            "lists": "/api/lists",
            "placesNear": "/api/places/near?lat=48.85&lng=2.35&radius=2000"
        }
    }

@app.get("/health")
def health(session: Session = Depends(get_db)):
    try:
        session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Health check failed: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"ok": False}
        )
    return {"ok": True}

app.include_router(books.router, prefix="/api")
app.include_router(lists.router, prefix="/api")
app.include_router(places.router, prefix="/api")
