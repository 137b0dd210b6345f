from fastapi import APIRouter, Depends

from ministore.dependencies import get_ledger
from ministore.services.inventory_service import InventoryLedger

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "/",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check that the inventory ledger is reachable."
)
def readiness_check(ledger: InventoryLedger = Depends(get_ledger)):
    """
    Readiness check for the ledger.

    Returns:
    - Ledger status
    - Number of products currently tracked
    """
    return {
        "status": "ready",
        "checks": {
            "ledger": True,
            "products": len(ledger)
        }
    }
