import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, status
from app.core.db import init_db, close_db
from app.api.v1.inventories import router as inventories_router
from app.api.v1.products import router as products_router
from app.api.v1.dashboard import router as dashboard_router
from app.api.v1.settings import router as settings_router
from app.api.v1.seed import router as seed_router
from app.core.config import PROJECT_NAME, VERSION, LOG_LEVEL
from app.core.exception_handlers import setup_exception_handlers

logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handles startup and shutdown events."""
    log.info(f"Starting {PROJECT_NAME} v{VERSION}...")
    await init_db() # Connect to DB and generate schemas
    yield
    await close_db()
    log.info(f"{PROJECT_NAME} stopped.")

app = FastAPI(
    title=PROJECT_NAME,
    version=VERSION,
    lifespan=lifespan,
    # Configure API documentation and paths
    docs_url="/docs",
    redoc_url="/redoc"
)

# Include routers for modular API structure
app.include_router(inventories_router, prefix="/api/v1/inventories", tags=["Inventories"])
app.include_router(products_router, prefix="/api/v1/products", tags=["Products"])
app.include_router(dashboard_router, prefix="/api/v1", tags=["Dashboard & Export"])
app.include_router(settings_router, prefix="/api/v1/settings", tags=["User Settings"])
app.include_router(seed_router, prefix="/api/v1/seed", tags=["Demo Data"])


setup_exception_handlers(app)

@app.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "ok", "app_name": PROJECT_NAME}
