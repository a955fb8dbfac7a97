import logging
from typing import Literal

from eth_utils import encode_hex

from blockchain.client import ChainClient, RpcError, RpcErrorKind
from blockchain.entities import (
    ContractEndpoint,
    EventPageEntity,
    UpdateEventEntity,
    ValueSnapshotEntity,
)
from blockchain.paging import clamp_block_range, paginate
from core.exceptions import (
    BaseCustomException,
    BlockchainReadException,
    ContractNotDeployedException,
    RPCTimeoutException,
    RPCUnreachableException,
)


class ChainReader:
    """
    Reads the SimpleStorage contract state and its update history.

    Every failure leaves this class as one of the custom exceptions:
    ``ContractNotDeployedException``, ``RPCTimeoutException``,
    ``RPCUnreachableException`` or ``BlockchainReadException``.

    Parameters
    ----------
    client : ChainClient
        RPC transport bound to the contract
    endpoint : ContractEndpoint
        Chain and contract being read
    logger : logging.Logger
        Logger instance
    max_block_range : int
        Widest block span a single log query may cover
    max_page_size : int
        Upper bound for the events page size
    """

    def __init__(
        self,
        client: ChainClient,
        endpoint: ContractEndpoint,
        logger: logging.Logger,
        max_block_range: int = 40000,
        max_page_size: int = 100
    ):
        self.client = client
        self.endpoint = endpoint
        self.logger = logger
        self.max_block_range = max_block_range
        self.max_page_size = max_page_size

    async def get_latest_value(self) -> ValueSnapshotEntity:
        """
        Get the value currently stored in the contract.

        Returns
        -------
        ValueSnapshotEntity
            Stored value as a decimal string
        """
        try:
            self.logger.info(f"Fetching latest value from contract {self.endpoint.contract_address}")

            block_number = await self.client.get_block_number()
            self.logger.info(f"Connected to blockchain. Latest block: {block_number}")

            await self._ensure_deployed()

            value = await self.client.get_value()
            self.logger.info(f"Latest value retrieved: {value}")

            return ValueSnapshotEntity(value=str(value))
        except BaseCustomException:
            raise
        except Exception as e:
            raise self._translate_error("get_latest_value", e) from e

    async def get_value_updated_events(
        self,
        from_block: int = 0,
        to_block: int | Literal["latest"] = "latest",
        page: int = 1,
        limit: int = 10
    ) -> EventPageEntity:
        """
        Get one page of ValueUpdated events within a block range.

        Parameters
        ----------
        from_block : int
            First block of the range
        to_block : int | Literal["latest"]
            Last block of the range, ``"latest"`` for the current height
        page : int
            1-based page number
        limit : int
            Page size, capped at ``max_page_size``

        Returns
        -------
        EventPageEntity
            Events on the page with pagination metadata
        """
        page = max(1, page)
        limit = min(max(1, limit), self.max_page_size)

        try:
            self.logger.info(
                f"Fetching events: from_block={from_block}, to_block={to_block}, "
                f"page={page}, limit={limit}"
            )

            await self._ensure_deployed()

            if to_block == "latest":
                to_block = await self.client.get_block_number()
                self.logger.info(f"Resolved latest block: {to_block}")

            safe_from_block, to_block = clamp_block_range(int(from_block), int(to_block), self.max_block_range)
            if safe_from_block != int(from_block):
                self.logger.info(
                    f"Block range too large ({to_block - int(from_block)}), "
                    f"limiting to last {self.max_block_range} blocks"
                )

            events = []
            if safe_from_block <= to_block:
                self.logger.info(f"Fetching logs from block {safe_from_block} to {to_block}")
                logs = await self.client.get_value_updated_logs(safe_from_block, to_block)
                events = [self._to_event(log) for log in logs]
                events.sort(key=lambda x: (int(x.block_number), x.log_index))
            self.logger.info(f"Events found: {len(events)}")
        except BaseCustomException:
            raise
        except Exception as e:
            raise self._translate_error("get_value_updated_events", e) from e

        items, total_pages = paginate(events, page, limit)
        return EventPageEntity(
            items=items,
            current_page=page,
            page_size=limit,
            total_items=len(events),
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
            from_block=safe_from_block,
            to_block=to_block
        )

    async def _ensure_deployed(self) -> None:
        """
        Fail fast when no bytecode is stored at the contract address.

        Raises
        ------
        ContractNotDeployedException
            If the address holds no code
        """
        code = await self.client.get_code()
        if not code:
            self.logger.error(f"No contract code at {self.endpoint.contract_address}")
            raise ContractNotDeployedException(
                f"No contract code found at address {self.endpoint.contract_address}. "
                f"Please verify the contract is deployed on {self.endpoint.chain_name} "
                f"(Chain ID: {self.endpoint.chain_id})."
            )
        self.logger.debug("Contract code found at address")

    @staticmethod
    def _to_event(log) -> UpdateEventEntity:
        """
        Convert a decoded ValueUpdated log into an entity.

        Parameters
        ----------
        log : EventData
            Decoded log with ``args.newValue``

        Returns
        -------
        UpdateEventEntity
            Event with block number and value as decimal strings
        """
        tx_hash = log["transactionHash"]
        if isinstance(tx_hash, (bytes, bytearray)):
            tx_hash = encode_hex(tx_hash)
        return UpdateEventEntity(
            block_number=str(log["blockNumber"]),
            value=str(log["args"]["newValue"]),
            tx_hash=str(tx_hash),
            log_index=int(log["logIndex"])
        )

    def _translate_error(self, operation: str, error: Exception) -> BaseCustomException:
        """
        Map any failure onto the service's error taxonomy.

        Parameters
        ----------
        operation : str
            Name of the failing operation, for logs
        error : Exception
            Raised exception

        Returns
        -------
        BaseCustomException
            Exception to raise to the HTTP layer
        """
        if not isinstance(error, RpcError):
            self.logger.exception(f"Unexpected error in {operation}")
            return BlockchainReadException(
                f"An error occurred while reading blockchain data: {error}"
            )

        self.logger.error(f"RPC error in {operation} ({error.kind.value}): {error}")

        if error.kind is RpcErrorKind.REVERT:
            return ContractNotDeployedException(
                f"Contract not found at address {self.endpoint.contract_address}. "
                f"Please verify the contract is deployed on {self.endpoint.chain_name} "
                f"(Chain ID: {self.endpoint.chain_id})."
            )
        if error.kind is RpcErrorKind.TIMEOUT:
            return RPCTimeoutException()
        if error.kind is RpcErrorKind.NETWORK:
            return RPCUnreachableException(
                f"Unable to connect to blockchain RPC. Please check that the RPC endpoint is "
                f"accessible or set the BLOCKCHAIN_RPC_URL environment variable. Error: {error}",
                data={
                    "rpcUrl": self.endpoint.rpc_url,
                    "chainId": self.endpoint.chain_id,
                    "chainName": self.endpoint.chain_name
                }
            )
        return BlockchainReadException(
            f"An error occurred while reading blockchain data: {error}"
        )
