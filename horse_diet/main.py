"""
Horse Diet Evaluator API - Main Application

Checks a horse's daily ration against weight-based nutrient requirements
using a catalog of feed nutrient profiles.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from horse_diet.core.app_logging import configure_logging
from horse_diet.core.config import settings
from horse_diet.core.database import Base, SessionLocal, engine
from horse_diet.api import diet, feeds
from horse_diet.seed_data import seed_feeds

configure_logging()

# Create database tables
Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    db = SessionLocal()
    try:
        seed_feeds(db)
    finally:
        db.close()
    yield


app = FastAPI(
    lifespan=lifespan,
    title=settings.APP_NAME,
    description="""
    ## Horse Diet Evaluator API

    Evaluate whether a horse's daily diet covers its nutrient requirements.

    ### Features
    - Weight-based daily requirements (energy, protein, calcium, phosphorus, vitamin E)
    - Per-feed nutrient aggregation from the feed catalog
    - Lacking / sufficient / overfed status per nutrient

    ### Core Endpoints
    - `/feed` - Browse the feed catalog
    - `/diet/evaluate` - Evaluate a diet
    """,
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(feeds.router)
app.include_router(diet.router)


@app.get("/")
def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs",
        "endpoints": {
            "feeds": "/feed",
            "diet": "/diet/evaluate",
        }
    }


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
