"""Taxonomy Checklist API.

This API renders single-term taxonomy inputs for admin forms:
- Taxonomy definitions (label, input element, hierarchy)
- Radio checklists (nested <ul>/<li> with radio inputs)
- Select option lists (flat <option> runs, indented by depth)
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src import __version__
from src.api.routes import taxonomies
from src.taxonomies.registry import get_taxonomy_registry

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: Pre-load the taxonomy registry
    logger.info("Loading taxonomy definitions...")
    taxonomy_registry = get_taxonomy_registry()
    logger.info(f"Loaded {taxonomy_registry.count()} taxonomies")

    logger.info("Taxonomy Checklist API ready")
    yield
    # Shutdown
    logger.info("Shutting down Taxonomy Checklist API")


# Create FastAPI app
app = FastAPI(
    title="Taxonomy Checklist API",
    description="""
## Single-Term Taxonomy Inputs

Renders taxonomy terms as the input element an admin form embeds:

- **Radio checklists**: nested lists of labelled radio inputs
- **Select options**: flat `<option>` runs with depth shown by indentation

### Key Endpoints

- `GET /v1/taxonomies` - List all taxonomies
- `GET /v1/taxonomies/{key}` - Get a taxonomy definition
- `POST /v1/taxonomies/{key}/checklist` - Render a registered taxonomy
- `POST /v1/checklist` - Render an unregistered taxonomy
""",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /v1 prefix
app.include_router(taxonomies.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Taxonomy Checklist API",
        "version": __version__,
        "description": "Single-term taxonomy checklist renderer",
        "docs": "/docs",
        "endpoints": {
            "taxonomies": "/v1/taxonomies",
            "checklist": "/v1/checklist",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    taxonomy_registry = get_taxonomy_registry()
    return {
        "status": "healthy",
        "taxonomies_loaded": taxonomy_registry.count(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.api.main:app",
        host="0.0.0.0",
        port=int(os.environ.get("TAXONOMY_API_PORT", "8001")),
        reload=True,
    )
