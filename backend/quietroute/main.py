"""
QuietRoute FastAPI Application
Main entry point for the backend API.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quietroute.config import settings
from quietroute.api.v1 import routes, edges, geocode

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# Silence verbose HTTP client loggers
logging.getLogger("urllib3").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Comfort-weighted walking route ranking: noise, lighting and crowd reports",
    version="1.0.0",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "QuietRoute API",
        "version": "1.0.0",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check_root():
    """Root health check endpoint for Docker/load balancers"""
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_PREFIX}/health")
async def health_check():
    """API health check endpoint"""
    return {"status": "healthy"}


# Include API routers
app.include_router(routes.router, prefix=settings.API_V1_PREFIX, tags=["routes"])
app.include_router(edges.router, prefix=settings.API_V1_PREFIX, tags=["edges"])
app.include_router(geocode.router, prefix=settings.API_V1_PREFIX, tags=["geocoding"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "quietroute.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Auto-reload on code changes
    )
