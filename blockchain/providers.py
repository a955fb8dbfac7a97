from dishka import Provider, Scope, provide, FromComponent
from blockchain.client import ChainClient
from blockchain.entities import ContractEndpoint
from blockchain.services import ChainReader
from blockchain.usecases import GetLatestValueUseCase, GetValueUpdatedEventsUseCase
from typing import Annotated, AsyncIterable
from web3 import AsyncWeb3
from core.environment.config import Settings
import aiohttp
import logging


class BlockchainProvider(Provider):
    """
    Provider for blockchain-related dependencies.
    """

    component = "blockchain"

    @provide(scope=Scope.APP)
    def get_contract_endpoint(
        self,
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> ContractEndpoint:
        """
        Provide the chain and contract this service is bound to.

        Parameters
        ----------
        settings : Settings
            Application settings
        logger : logging.Logger
            Logger instance

        Returns
        -------
        ContractEndpoint
            Contract endpoint
        """
        endpoint = ContractEndpoint(
            chain_id=settings.chain_id,
            chain_name=settings.chain_name,
            rpc_url=settings.blockchain_rpc_url,
            contract_address=settings.contract_address
        )
        logger.info(
            f"Blockchain endpoint: RPC {endpoint.rpc_url}, chain {endpoint.chain_name} "
            f"({endpoint.chain_id}), contract {endpoint.contract_address}"
        )
        return endpoint

    @provide(scope=Scope.APP)
    async def get_web3_client(
        self,
        settings: Annotated[Settings, FromComponent("environment")]
    ) -> AsyncIterable[AsyncWeb3]:
        """
        Provide Web3 client for the configured chain.

        Parameters
        ----------
        settings : Settings
            Application settings

        Yields
        ------
        AsyncWeb3
            Web3 client with web3's own retries disabled; its HTTP
            sessions are closed when the container closes
        """
        web3 = AsyncWeb3(
            AsyncWeb3.AsyncHTTPProvider(
                settings.blockchain_rpc_url,
                request_kwargs={"timeout": aiohttp.ClientTimeout(total=settings.rpc_timeout)},
                exception_retry_configuration=None
            )
        )

        try:
            yield web3
        finally:
            await web3.provider.disconnect()

    @provide(scope=Scope.APP)
    def get_chain_client(
        self,
        web3: Annotated[AsyncWeb3, FromComponent("blockchain")],
        endpoint: Annotated[ContractEndpoint, FromComponent("blockchain")],
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> ChainClient:
        """
        Provide RPC transport bound to the contract.

        Parameters
        ----------
        web3 : AsyncWeb3
            Web3 client
        endpoint : ContractEndpoint
            Contract endpoint
        settings : Settings
            Application settings
        logger : logging.Logger
            Logger instance

        Returns
        -------
        ChainClient
            Chain client instance
        """
        return ChainClient(
            web3=web3,
            endpoint=endpoint,
            logger=logger,
            retry_count=settings.rpc_retry_count,
            retry_delay=settings.rpc_retry_delay
        )

    @provide(scope=Scope.APP)
    def get_chain_reader(
        self,
        client: Annotated[ChainClient, FromComponent("blockchain")],
        endpoint: Annotated[ContractEndpoint, FromComponent("blockchain")],
        settings: Annotated[Settings, FromComponent("environment")],
        logger: Annotated[logging.Logger, FromComponent("logger")]
    ) -> ChainReader:
        """
        Provide chain reader.

        Parameters
        ----------
        client : ChainClient
            Chain client instance
        endpoint : ContractEndpoint
            Contract endpoint
        settings : Settings
            Application settings
        logger : logging.Logger
            Logger instance

        Returns
        -------
        ChainReader
            Chain reader instance
        """
        return ChainReader(
            client=client,
            endpoint=endpoint,
            logger=logger,
            max_block_range=settings.max_block_range,
            max_page_size=settings.max_page_size
        )

    @provide(scope=Scope.REQUEST)
    def get_latest_value_use_case(
        self,
        chain_reader: Annotated[ChainReader, FromComponent("blockchain")]
    ) -> GetLatestValueUseCase:
        """
        Provide get latest value use case.

        Parameters
        ----------
        chain_reader : ChainReader
            Chain reader instance

        Returns
        -------
        GetLatestValueUseCase
            Get latest value use case
        """
        return GetLatestValueUseCase(chain_reader=chain_reader)

    @provide(scope=Scope.REQUEST)
    def get_value_updated_events_use_case(
        self,
        chain_reader: Annotated[ChainReader, FromComponent("blockchain")]
    ) -> GetValueUpdatedEventsUseCase:
        """
        Provide get value updated events use case.

        Parameters
        ----------
        chain_reader : ChainReader
            Chain reader instance

        Returns
        -------
        GetValueUpdatedEventsUseCase
            Get value updated events use case
        """
        return GetValueUpdatedEventsUseCase(chain_reader=chain_reader)
