from pydantic import BaseModel, ConfigDict


class ContractEndpoint(BaseModel):
    """
    The single chain and contract this service reads from.

    Built once at startup and never mutated.

    Attributes
    ----------
    chain_id : int
        Chain identifier
    chain_name : str
        Human readable chain name
    rpc_url : str
        RPC endpoint URL
    contract_address : str
        Address of the SimpleStorage contract
    """
    chain_id: int
    chain_name: str
    rpc_url: str
    contract_address: str

    model_config = ConfigDict(frozen=True)


class ValueSnapshotEntity(BaseModel):
    """
    Entity representing the contract's current stored value.

    Attributes
    ----------
    value : str
        Stored uint256 rendered as a decimal string
    """
    value: str

    model_config = ConfigDict(from_attributes=True)


class UpdateEventEntity(BaseModel):
    """
    Entity representing one decoded ValueUpdated log.

    Attributes
    ----------
    block_number : str
        Block number as a decimal string
    value : str
        New value as a decimal string
    tx_hash : str
        Transaction hash (0x-prefixed hex)
    log_index : int
        Log index within the block
    """
    block_number: str
    value: str
    tx_hash: str
    log_index: int

    model_config = ConfigDict(from_attributes=True)


class EventPageEntity(BaseModel):
    """
    Entity representing one page over the decoded events of a block range.

    Attributes
    ----------
    items : list[UpdateEventEntity]
        Events on this page
    current_page : int
        1-based page number
    page_size : int
        Effective page size
    total_items : int
        Number of events in the whole range
    total_pages : int
        Number of pages in the whole range
    has_next_page : bool
        Whether a following page exists
    has_prev_page : bool
        Whether a preceding page exists
    from_block : int
        First block of the queried (possibly clamped) range
    to_block : int
        Last block of the queried range
    """
    items: list[UpdateEventEntity]
    current_page: int
    page_size: int
    total_items: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
    from_block: int
    to_block: int

    model_config = ConfigDict(from_attributes=True)
