from fastapi import APIRouter, Depends

from dateboard.api.dependencies import get_listing_store, get_sweeper
from dateboard.api.schemas.date_schemas import HealthResponse
from dateboard.application.interfaces.listing_store import ListingStore
from dateboard.application.services.expiry_sweeper import ExpirySweeper

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    store: ListingStore = Depends(get_listing_store),
    sweeper: ExpirySweeper = Depends(get_sweeper),
) -> HealthResponse:
    """Liveness plus sweeper state."""
    sweeper_status = "running" if sweeper.running else "stopped"
    return HealthResponse(
        status="healthy" if sweeper.running else "degraded",
        listings=await store.count(),
        sweeper=sweeper_status,
    )
