from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional

from ministore.dependencies import get_ledger
from ministore.models.product import Product
from ministore.services.inventory_service import (
    InventoryLedger,
    DuplicateNameError,
    InvalidInputError,
    ProductNotFoundError
)
from ministore.schemas.product import (
    ProductCreate,
    ProductResponse,
    ProductListResponse,
    StatisticsResponse
)
from ministore.utils.formatting import format_currency

router = APIRouter(prefix="/products", tags=["Products"])


def to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        name=product.name,
        price=product.price,
        stock=product.stock,
        price_display=format_currency(product.price)
    )


@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new product",
    description="Add a product with name, price, and initial stock. Names are unique regardless of case."
)
def create_product(
    product_data: ProductCreate,
    ledger: InventoryLedger = Depends(get_ledger)
):
    """
    Add a new product.

    - **name**: Product name (required, stored with its original casing)
    - **price**: Product price, must be positive (required)
    - **stock**: Initial stock quantity, must be non-negative (required)
    """
    try:
        product = ledger.add_product(
            product_data.name,
            product_data.price,
            product_data.stock
        )
    except DuplicateNameError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e)
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )

    return to_response(product)


@router.get(
    "/",
    response_model=ProductListResponse,
    summary="List inventory",
    description="List all products in insertion order, optionally filtered by a name fragment."
)
def list_products(
    search: Optional[str] = Query(None, description="Case-insensitive name fragment"),
    ledger: InventoryLedger = Depends(get_ledger)
):
    """List or search products."""
    if search:
        products = ledger.search_by_name(search)
    else:
        products = ledger.list_inventory()

    return ProductListResponse(
        items=[to_response(p) for p in products],
        total=len(products),
        search=search or None
    )


@router.get(
    "/statistics",
    response_model=StatisticsResponse,
    summary="Price statistics",
    description="Cheapest and most expensive products. The earliest product wins ties."
)
def product_statistics(ledger: InventoryLedger = Depends(get_ledger)):
    """Get the cheapest and most expensive products."""
    stats = ledger.statistics()

    if stats is None:
        return StatisticsResponse(empty=True)

    return StatisticsResponse(
        empty=False,
        cheapest=to_response(stats.cheapest),
        most_expensive=to_response(stats.most_expensive)
    )


@router.get(
    "/{name}",
    response_model=ProductResponse,
    summary="Get product by name",
    description="Look up a product by exact name, ignoring case."
)
def get_product(
    name: str,
    ledger: InventoryLedger = Depends(get_ledger)
):
    """Get a product by name."""
    try:
        product = ledger.get_product(name)
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )

    return to_response(product)
