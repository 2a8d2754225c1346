from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from catalog.config import get_settings
from catalog.database import engine, Base
from catalog.api import products, health

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up catalog service...")

    if settings.STORE_BACKEND == "sql":
        logger.info("Creating database tables...")
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully")
    else:
        logger.info(f"Using '{settings.STORE_BACKEND}' product store, skipping table creation")

    yield

    logger.info("Shutting down catalog service...")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    Product catalog backed by a relational store.

    - **List products**: `GET /api/products` returns every product in creation order
    - **Create product**: `POST /api/products` validates the product and stores it;
      the server assigns the id
    """,
    version=settings.APP_VERSION,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(health.router)
app.include_router(products.router)


@app.get("/", tags=["Root"])
def root():
    """Welcome message."""
    return {"message": "Welcome to this application", "age": 21}
