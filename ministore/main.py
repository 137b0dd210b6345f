from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from ministore.config import get_settings
from ministore.dependencies import get_ledger
from ministore.api import products, purchases, sales, health
from ministore.utils.formatting import format_money

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
    # Startup
    logger.info("Starting up application...")
    logger.info("Inventory ledger ready (in-memory, empty at startup)")

    yield

    # Shutdown: report the session's sales once
    total = get_ledger().total_sales()
    logger.info(f"Shutting down application... total accumulated sales: {format_money(total)}")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="""
    An in-memory inventory manager for a small store:

    - **Products**: Add, list, look up and search products by name
    - **Purchases**: Buy products with atomic stock and sales updates
    - **Statistics**: Cheapest and most expensive products
    - **Sales**: Revenue accumulated over the session

    ## Names
    Product names are unique regardless of case. They are stored and shown
    with the casing used when the product was added, and every lookup
    ignores case.

    ## Concurrency
    Requests are served from a worker pool. The ledger serializes its
    check-then-write operations, so two buyers racing for the last unit
    cannot both succeed.
    """,
    version=settings.APP_VERSION,
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT"
    },
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(health.router, prefix=settings.API_PREFIX)
app.include_router(products.router, prefix=settings.API_PREFIX)
app.include_router(purchases.router, prefix=settings.API_PREFIX)
app.include_router(sales.router, prefix=settings.API_PREFIX)


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with API information."""
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "health": f"{settings.API_PREFIX}/health"
    }
