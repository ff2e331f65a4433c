from fastapi import APIRouter, Depends

from dateboard.api.dependencies import get_listing_store
from dateboard.api.schemas.date_schemas import DateResponse
from dateboard.application.interfaces.listing_store import ListingStore

router = APIRouter(prefix="/kiosk", tags=["kiosk"])


@router.get("", response_model=DateResponse)
async def first_date(store: ListingStore = Depends(get_listing_store)) -> DateResponse:
    """First date on the board, or a placeholder while it is empty."""
    return DateResponse.from_domain(await store.get_next_after(None))


@router.get("/{date_id}", response_model=DateResponse)
async def next_date(
    date_id: str,
    store: ListingStore = Depends(get_listing_store),
) -> DateResponse:
    """The date after date_id, wrapping to the first one."""
    return DateResponse.from_domain(await store.get_next_after(date_id))
