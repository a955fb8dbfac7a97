from typing import Literal

from blockchain.services import ChainReader
from blockchain.schemas import EventResponse, EventsResponse, PaginationResponse, ValueResponse
from core.schemas import ApiResponse


class GetLatestValueUseCase:
    """
    Use case for reading the contract's current value.

    Parameters
    ----------
    chain_reader : ChainReader
        Chain reader instance
    """

    def __init__(self, chain_reader: ChainReader):
        self.chain_reader = chain_reader

    async def __call__(self) -> ApiResponse[ValueResponse]:
        """
        Execute use case.

        Returns
        -------
        ApiResponse[ValueResponse]
            Envelope with the stored value
        """
        snapshot = await self.chain_reader.get_latest_value()

        return ApiResponse[ValueResponse](
            message="Latest value retrieved successfully",
            data=ValueResponse(value=snapshot.value)
        )


class GetValueUpdatedEventsUseCase:
    """
    Use case for listing ValueUpdated events.

    Parameters
    ----------
    chain_reader : ChainReader
        Chain reader instance
    """

    def __init__(self, chain_reader: ChainReader):
        self.chain_reader = chain_reader

    async def __call__(
        self,
        from_block: int,
        to_block: str,
        page: int,
        limit: int
    ) -> EventsResponse:
        """
        Execute use case.

        Parameters
        ----------
        from_block : int
            First block of the range
        to_block : str
            Last block of the range as digits, or ``"latest"``
        page : int
            1-based page number
        limit : int
            Page size

        Returns
        -------
        EventsResponse
            Envelope with the page of events and pagination metadata
        """
        resolved_to_block: int | Literal["latest"] = (
            "latest" if to_block == "latest" else int(to_block)
        )

        result = await self.chain_reader.get_value_updated_events(
            from_block=from_block,
            to_block=resolved_to_block,
            page=page,
            limit=limit
        )

        return EventsResponse(
            message="Events retrieved successfully",
            data=[EventResponse.model_validate(item) for item in result.items],
            pagination=PaginationResponse.model_validate(result)
        )
