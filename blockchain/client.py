import asyncio
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, TypeVar

import aiohttp
from web3 import AsyncWeb3
from web3.exceptions import (
    BadFunctionCallOutput,
    ContractLogicError,
    ProviderConnectionError,
)

from blockchain.abi import SIMPLE_STORAGE_ABI, VALUE_UPDATED_TOPIC
from blockchain.entities import ContractEndpoint

T = TypeVar("T")

REVERT_MARKERS = (
    "execution reverted",
    "contract does not exist",
    "contract not found",
)


class RpcErrorKind(str, Enum):
    """Closed classification of failures leaving the RPC transport."""

    TIMEOUT = "timeout"
    NETWORK = "network"
    REVERT = "revert"
    UNKNOWN = "unknown"


TRANSIENT_KINDS = (RpcErrorKind.TIMEOUT, RpcErrorKind.NETWORK)


class RpcError(Exception):
    """
    Failure of an RPC call, tagged with its classification.

    Parameters
    ----------
    kind : RpcErrorKind
        Error classification
    cause : BaseException
        Original exception raised by the transport
    """

    def __init__(self, kind: RpcErrorKind, cause: BaseException):
        self.kind = kind
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)


def classify_rpc_error(exc: BaseException) -> RpcErrorKind:
    """
    Classify a transport or provider exception.

    Parameters
    ----------
    exc : BaseException
        Exception raised while talking to the RPC provider

    Returns
    -------
    RpcErrorKind
        Error classification
    """
    # TimeoutError subclasses OSError, so it has to be checked first
    if isinstance(exc, asyncio.TimeoutError):
        return RpcErrorKind.TIMEOUT
    if isinstance(exc, aiohttp.ClientResponseError):
        if exc.status >= 500 or exc.status == 429:
            return RpcErrorKind.NETWORK
        return RpcErrorKind.UNKNOWN
    if isinstance(exc, (aiohttp.ClientConnectionError, ProviderConnectionError, OSError)):
        return RpcErrorKind.NETWORK
    if isinstance(exc, (ContractLogicError, BadFunctionCallOutput)):
        return RpcErrorKind.REVERT

    message = str(exc).lower()
    if any(marker in message for marker in REVERT_MARKERS):
        return RpcErrorKind.REVERT
    return RpcErrorKind.UNKNOWN


class ChainClient:
    """
    RPC transport bound to one chain and one SimpleStorage contract.

    Retries timeouts and network failures with a linear backoff and
    raises ``RpcError`` for anything it gives up on.

    Parameters
    ----------
    web3 : AsyncWeb3
        Web3 client for the configured chain
    endpoint : ContractEndpoint
        Chain and contract the client is bound to
    logger : logging.Logger
        Logger instance
    retry_count : int
        Maximum attempts per call
    retry_delay : float
        Base delay between attempts in seconds
    """

    def __init__(
        self,
        web3: AsyncWeb3,
        endpoint: ContractEndpoint,
        logger: logging.Logger,
        retry_count: int = 3,
        retry_delay: float = 1.0
    ):
        self.web3 = web3
        self.endpoint = endpoint
        self.logger = logger
        self.retry_count = max(1, retry_count)
        self.retry_delay = retry_delay

    def _address(self) -> str:
        return AsyncWeb3.to_checksum_address(self.endpoint.contract_address)

    def _contract(self):
        return self.web3.eth.contract(address=self._address(), abi=SIMPLE_STORAGE_ABI)

    async def _call(self, label: str, request: Callable[[], Awaitable[T]]) -> T:
        """
        Run one RPC request with retries.

        Parameters
        ----------
        label : str
            Request name used in log lines
        request : Callable[[], Awaitable[T]]
            Factory producing a fresh awaitable per attempt

        Returns
        -------
        T
            Request result

        Raises
        ------
        RpcError
            If the request fails permanently or exhausts its attempts
        """
        attempt = 0
        while True:
            attempt += 1
            try:
                return await request()
            except Exception as e:
                kind = classify_rpc_error(e)
                if kind in TRANSIENT_KINDS and attempt < self.retry_count:
                    delay = self.retry_delay * attempt
                    self.logger.warning(
                        f"{label} failed ({kind.value}, attempt {attempt}/{self.retry_count}): {e}. "
                        f"Retrying in {delay:.1f}s"
                    )
                    await asyncio.sleep(delay)
                    continue
                raise RpcError(kind, e) from e

    async def get_block_number(self) -> int:
        """
        Get the current chain height.

        Returns
        -------
        int
            Latest block number
        """
        return int(await self._call("eth_blockNumber", lambda: self.web3.eth.get_block_number()))

    async def get_code(self) -> bytes:
        """
        Get the bytecode stored at the contract address.

        Returns
        -------
        bytes
            Contract bytecode, empty when nothing is deployed
        """
        code = await self._call("eth_getCode", lambda: self.web3.eth.get_code(self._address()))
        return bytes(code or b"")

    async def get_value(self) -> int:
        """
        Call the contract's ``getValue()`` accessor.

        Returns
        -------
        int
            Stored uint256 value
        """
        value = await self._call(
            "eth_call getValue",
            lambda: self._contract().functions.getValue().call()
        )
        return int(value)

    async def get_value_updated_logs(self, from_block: int, to_block: int) -> list[Any]:
        """
        Fetch and decode ValueUpdated logs in a block range.

        Parameters
        ----------
        from_block : int
            First block (inclusive)
        to_block : int
            Last block (inclusive)

        Returns
        -------
        list
            Decoded event data in chain order
        """
        logs = await self._call(
            "eth_getLogs",
            lambda: self.web3.eth.get_logs({
                "address": self._address(),
                "topics": [VALUE_UPDATED_TOPIC],
                "fromBlock": from_block,
                "toBlock": to_block
            })
        )

        event = self._contract().events.ValueUpdated()
        return [event.process_log(log) for log in logs]
