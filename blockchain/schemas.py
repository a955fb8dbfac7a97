from core.schemas import ApiResponse, CamelModel


class ValueResponse(CamelModel):
    """
    Response payload for the current value.

    Attributes
    ----------
    value : str
        Stored uint256 as a decimal string
    """
    value: str


class EventResponse(CamelModel):
    """
    Response schema for a single ValueUpdated event.

    Attributes
    ----------
    block_number : str
        Block number as a decimal string
    value : str
        New value as a decimal string
    tx_hash : str
        Transaction hash
    log_index : int
        Log index
    """
    block_number: str
    value: str
    tx_hash: str
    log_index: int


class PaginationResponse(CamelModel):
    """
    Pagination metadata for the events listing.

    Attributes
    ----------
    current_page : int
        1-based page number
    page_size : int
        Effective page size
    total_items : int
        Events in the whole range
    total_pages : int
        Pages in the whole range
    has_next_page : bool
        Whether a following page exists
    has_prev_page : bool
        Whether a preceding page exists
    """
    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class EventsResponse(ApiResponse[list[EventResponse]]):
    """
    Envelope for a page of events.

    Attributes
    ----------
    pagination : PaginationResponse
        Pagination metadata
    """
    pagination: PaginationResponse
