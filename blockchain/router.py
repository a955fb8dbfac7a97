from fastapi import APIRouter, Query
from dishka.integrations.fastapi import inject
from dishka import FromComponent
from typing import Annotated
from blockchain.schemas import EventsResponse, ValueResponse
from blockchain.usecases import GetLatestValueUseCase, GetValueUpdatedEventsUseCase
from core.schemas import ApiResponse

router = APIRouter(
    prefix="/blockchain",
    tags=["Blockchain"]
)


@router.get("/value", response_model=ApiResponse[ValueResponse])
@inject
async def get_latest_value(
    use_case: Annotated[
        GetLatestValueUseCase, FromComponent("blockchain")
    ]
) -> ApiResponse[ValueResponse]:
    """
    Get the value currently stored in the contract.

    Parameters
    ----------
    use_case : GetLatestValueUseCase
        Use case for reading the current value

    Returns
    -------
    ApiResponse[ValueResponse]
        Stored value
    """
    return await use_case()


@router.get("/events", response_model=EventsResponse)
@inject
async def get_value_updated_events(
    use_case: Annotated[
        GetValueUpdatedEventsUseCase, FromComponent("blockchain")
    ],
    from_block: Annotated[int, Query(alias="fromBlock", ge=0)] = 0,
    to_block: Annotated[str, Query(alias="toBlock", pattern=r"^(latest|\d+)$")] = "latest",
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1)] = 10
) -> EventsResponse:
    """
    Get a page of ValueUpdated events within a block range.

    Parameters
    ----------
    use_case : GetValueUpdatedEventsUseCase
        Use case for listing events
    from_block : int
        First block of the range
    to_block : str
        Last block of the range, or ``latest``
    page : int
        1-based page number
    limit : int
        Page size

    Returns
    -------
    EventsResponse
        Events on the page and pagination metadata
    """
    return await use_case(
        from_block=from_block,
        to_block=to_block,
        page=page,
        limit=limit
    )
