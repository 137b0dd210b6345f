from fastapi import APIRouter, Depends, HTTPException, status

from ministore.dependencies import get_ledger
from ministore.services.inventory_service import (
    InventoryLedger,
    InsufficientStockError,
    InvalidQuantityError,
    ProductNotFoundError
)
from ministore.schemas.purchase import PurchaseCreate, PurchaseResponse
from ministore.utils.formatting import format_currency

router = APIRouter(prefix="/purchases", tags=["Purchases"])


@router.post(
    "/",
    response_model=PurchaseResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Buy a product",
    description="""
    Buy a quantity of a product by name.

    The stock decrement and the sales total update happen together
    under the ledger lock: either both are applied or neither is.
    Requests for more than the available stock receive a 400 error
    whose detail carries the available quantity.
    """
)
def create_purchase(
    purchase_data: PurchaseCreate,
    ledger: InventoryLedger = Depends(get_ledger)
):
    """
    Buy a product.

    - **name**: Name of the product to buy, case-insensitive (required)
    - **quantity**: Number of items to buy, default is 1 (optional)
    """
    with ledger.locked():
        try:
            subtotal = ledger.purchase(purchase_data.name, purchase_data.quantity)
        except ProductNotFoundError as e:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=str(e)
            )
        except InsufficientStockError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e)
            )
        except InvalidQuantityError as e:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=str(e)
            )

        product = ledger.get_product(purchase_data.name)
        total_sales = ledger.total_sales()

    return PurchaseResponse(
        name=product.name,
        quantity=purchase_data.quantity,
        unit_price=product.price,
        subtotal=subtotal,
        subtotal_display=format_currency(subtotal),
        remaining_stock=product.stock,
        total_sales=total_sales
    )
