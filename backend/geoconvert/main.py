import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geoconvert import __version__
from geoconvert.api.v1.router import api_router
from geoconvert.core.config import CORS_ORIGINS

logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title="Geoconvert API",
    description="API for converting WGS84 coordinates between decimal degrees, DMS and UTM.",
    version=__version__,
)

# --- CORS Middleware ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,  # 由 GEOCONVERT_CORS_ORIGINS 設定
    allow_credentials=True,
    allow_methods=["*"],  # 允許所有方法
    allow_headers=["*"],  # 允許所有頭部
)
logger.info(f"CORS middleware added with origins: {CORS_ORIGINS}")


# --- Test Endpoint (Before API v1 Router) ---
@app.get("/ping", tags=["Test"])
async def ping():
    return {"message": "pong"}


# --- Include API Routers ---
app.include_router(api_router, prefix="/api/v1")  # Add a /api/v1 prefix
logger.info("Included API router v1 at /api/v1.")


# --- Root Endpoint ---
@app.get("/", tags=["Root"])
async def read_root():
    """Provides a basic welcome message."""
    logger.info("--- Root endpoint '/' requested ---")
    return {"message": "Welcome to the Geoconvert API"}


# --- Uvicorn Entry Point (for direct run, if needed) ---
if __name__ == "__main__":
    import uvicorn

    logger.info("Starting Uvicorn server directly...")
    # Recommended: `uvicorn geoconvert.main:app --reload` from the backend directory.
    uvicorn.run(app, host="0.0.0.0", port=8000)
