from eth_abi import encode as abi_encode
from eth_utils import encode_hex, keccak

CONTRACT_ADDRESS = '0x5f329c7c45318a8c7c42ef80b8f7ef55ddca9d5b'
TX_HASH = '0x' + 'ab' * 32
VALUE_UPDATED_SIGNATURE = encode_hex(keccak(text='ValueUpdated(uint256)'))


def make_log(block_number: int, value: int, log_index: int = 0, tx_hash: bytes | str | None = None) -> dict:
    """
    Build a decoded ValueUpdated log the way web3 returns it.

    Parameters
    ----------
    block_number : int
        Block number
    value : int
        New value
    log_index : int
        Log index
    tx_hash : bytes | str | None
        Transaction hash, defaults to a fixed hash

    Returns
    -------
    dict
        Decoded event data
    """
    return {
        'event': 'ValueUpdated',
        'args': {'newValue': value},
        'blockNumber': block_number,
        'logIndex': log_index,
        'transactionHash': tx_hash if tx_hash is not None else bytes.fromhex('ab' * 32),
        'address': CONTRACT_ADDRESS,
    }


def make_raw_log(block_number: int, value: int, log_index: int = 0) -> dict:
    """
    Build a ValueUpdated log as an RPC node returns it from eth_getLogs.

    Parameters
    ----------
    block_number : int
        Block number
    value : int
        New value, ABI-encoded into ``data``
    log_index : int
        Log index

    Returns
    -------
    dict
        Raw JSON-RPC log object
    """
    return {
        'address': CONTRACT_ADDRESS,
        'topics': [VALUE_UPDATED_SIGNATURE],
        'data': encode_hex(abi_encode(['uint256'], [value])),
        'blockNumber': hex(block_number),
        'blockHash': '0x' + '11' * 32,
        'transactionHash': TX_HASH,
        'transactionIndex': '0x0',
        'logIndex': hex(log_index),
        'removed': False,
    }
