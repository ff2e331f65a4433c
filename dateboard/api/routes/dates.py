import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from dateboard.api.dependencies import form_or_json, get_listing_store
from dateboard.api.schemas.date_schemas import (
    DateContentSchema,
    DateCreatedResponse,
    DateResponse,
    DeleteRequest,
    DeleteResponse,
    TimeoutRequest,
    TimeoutResponse,
)
from dateboard.application.interfaces.listing_store import ListingStore
from dateboard.domain.entities.date_listing import DateContent
from dateboard.domain.errors import (
    ListingNotFoundError,
    ListingValidationError,
    UnauthorizedError,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/dates", tags=["dates"])

NOT_FOUND_DETAIL = "Date does not exist."
UNAUTHORIZED_DETAIL = "Incorrect password."


def _validation_detail(exc: ListingValidationError) -> dict:  # type: ignore[type-arg]
    detail: dict = {"errors": exc.errors}  # type: ignore[type-arg]
    if exc.content is not None:
        detail["content"] = DateContentSchema.from_domain(exc.content).model_dump()
    return detail


@router.get("", response_model=list[DateResponse])
async def list_dates(store: ListingStore = Depends(get_listing_store)) -> list[DateResponse]:
    return [DateResponse.from_domain(date) for date in await store.list()]


@router.get("/new", response_model=DateContentSchema)
async def new_date_form() -> DateContentSchema:
    """Blank form content with the defaults a new date starts from."""
    return DateContentSchema.from_domain(DateContent())


@router.post("", response_model=DateCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_date(
    body: DateContentSchema = Depends(form_or_json(DateContentSchema)),
    store: ListingStore = Depends(get_listing_store),
) -> DateCreatedResponse:
    try:
        listing_id = await store.create(body.to_domain())
    except ListingValidationError as exc:
        logger.info("date_rejected", errors=len(exc.errors))
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=_validation_detail(exc),
        )

    logger.info("date_created", listing_id=listing_id, lifetime=body.lifetime)
    return DateCreatedResponse(id=listing_id)


@router.get("/{date_id}", response_model=DateResponse)
async def get_date(
    date_id: str,
    store: ListingStore = Depends(get_listing_store),
) -> DateResponse:
    try:
        listing = await store.get(date_id)
    except ListingNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    return DateResponse.from_domain(listing)


@router.post("/{date_id}/delete", response_model=DeleteResponse)
async def delete_date(
    date_id: str,
    body: DeleteRequest = Depends(form_or_json(DeleteRequest)),
    store: ListingStore = Depends(get_listing_store),
) -> DeleteResponse:
    try:
        await store.delete(date_id, body.password)
    except ListingNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    except UnauthorizedError:
        logger.warning("date_delete_refused", listing_id=date_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=UNAUTHORIZED_DETAIL)

    logger.info("date_deleted", listing_id=date_id)
    return DeleteResponse()


@router.post("/{date_id}/timeout", response_model=TimeoutResponse)
async def reset_date_timeout(
    date_id: str,
    body: TimeoutRequest = Depends(form_or_json(TimeoutRequest)),
    store: ListingStore = Depends(get_listing_store),
) -> TimeoutResponse:
    try:
        updated = await store.reset_timeout(date_id, body.password, body.days)
    except ListingValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=_validation_detail(exc),
        )
    except ListingNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)
    except UnauthorizedError:
        logger.warning("date_timeout_refused", listing_id=date_id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=UNAUTHORIZED_DETAIL)

    if updated is None:
        logger.info("date_deleted", listing_id=date_id, via="timeout")
        return TimeoutResponse(deleted=True)

    logger.info("date_timeout_reset", listing_id=date_id, days=body.days)
    return TimeoutResponse(deleted=False, date=DateResponse.from_domain(updated))
