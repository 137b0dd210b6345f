from fastapi import APIRouter, Depends

from ministore.dependencies import get_ledger
from ministore.services.inventory_service import InventoryLedger
from ministore.schemas.purchase import SalesTotalResponse
from ministore.utils.formatting import format_money, format_receipt

router = APIRouter(prefix="/sales", tags=["Sales"])


@router.get(
    "/total",
    response_model=SalesTotalResponse,
    summary="Total sales",
    description="Revenue accumulated by every confirmed purchase since startup."
)
def sales_total(ledger: InventoryLedger = Depends(get_ledger)):
    """Get the accumulated sales and the final receipt text."""
    total = ledger.total_sales()

    return SalesTotalResponse(
        total_sales=total,
        total_sales_display=format_money(total),
        receipt=format_receipt(total)
    )
