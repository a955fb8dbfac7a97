import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def clamp_block_range(from_block: int, to_block: int, max_range: int) -> tuple[int, int]:
    """
    Narrow a block range to at most ``max_range`` blocks ending at ``to_block``.

    Older history is dropped instead of failing, since providers reject
    log queries spanning too many blocks.

    Parameters
    ----------
    from_block : int
        Requested first block
    to_block : int
        Requested last block
    max_range : int
        Widest allowed span

    Returns
    -------
    tuple[int, int]
        Effective (from_block, to_block)
    """
    if to_block - from_block > max_range:
        from_block = max(0, to_block - max_range)
    return from_block, to_block


def paginate(items: Sequence[T], page: int, limit: int) -> tuple[list[T], int]:
    """
    Slice one page out of an ordered sequence.

    Parameters
    ----------
    items : Sequence[T]
        Full ordered sequence
    page : int
        1-based page number
    limit : int
        Page size

    Returns
    -------
    tuple[list[T], int]
        Items on the page and the total page count
    """
    total_pages = math.ceil(len(items) / limit)
    start = (page - 1) * limit
    return list(items[start:start + limit]), total_pages
