"""
FastAPI application entry point.

Run with: uvicorn api.main:app --reload
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables from backend/.env (optional) before other imports that read env
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(env_path)

from api.database import books_repo, seed_sample_books
from api.routes import books
from settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s", settings.API_TITLE)
    if settings.SEED_SAMPLE_BOOKS:
        seed_sample_books(books_repo)
    yield
    logger.info("Shutting down %s", settings.API_TITLE)


# Create app
app = FastAPI(
    title=settings.API_TITLE,
    description="The books managing API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(books.router, prefix="/books", tags=["Books"])


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": settings.API_TITLE}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
