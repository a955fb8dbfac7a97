import logging
import os
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from dishka import Provider, Scope, provide
from aiohttp import web
from httpx import AsyncClient, ASGITransport


# Set test environment variables before imports
os.environ['ENV_FILE'] = 'tests/.env.missing'
os.environ['BLOCKCHAIN_RPC_URL'] = 'https://rpc.test/fuji'
os.environ['CONTRACT_ADDRESS'] = '0x5f329c7c45318a8c7c42ef80b8f7ef55ddca9d5b'
os.environ['CHAIN_ID'] = '43113'
os.environ['CHAIN_NAME'] = 'Avalanche Fuji'

from blockchain.client import ChainClient  # noqa: E402
from blockchain.entities import ContractEndpoint  # noqa: E402
from helpers import CONTRACT_ADDRESS  # noqa: E402


class FakeChainProvider(Provider):
    """Replaces the real RPC transport with a test double."""

    component = "blockchain"

    def __init__(self, chain_client):
        super().__init__()
        self.chain_client = chain_client

    @provide(scope=Scope.APP)
    def get_chain_client(self) -> ChainClient:
        return self.chain_client


@pytest.fixture
def endpoint() -> ContractEndpoint:
    return ContractEndpoint(
        chain_id=43113,
        chain_name='Avalanche Fuji',
        rpc_url='https://rpc.test/fuji',
        contract_address=CONTRACT_ADDRESS
    )


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("storage_api.tests")


@pytest.fixture
def fake_chain_client():
    """Chain client double holding a deployed contract with value 42."""
    mock = AsyncMock(spec=ChainClient)
    mock.get_block_number.return_value = 5_000_000
    mock.get_code.return_value = bytes.fromhex('6080604052')
    mock.get_value.return_value = 42
    mock.get_value_updated_logs.return_value = []
    return mock


@pytest_asyncio.fixture
async def client(fake_chain_client):
    """
    Fixture for async test client with the chain client replaced.

    Parameters
    ----------
    fake_chain_client : AsyncMock
        Mocked chain client

    Yields
    ------
    AsyncClient
        Async HTTP client for testing
    """
    from core.container import create_container
    from main import create_app

    container = create_container(FakeChainProvider(fake_chain_client))
    app = create_app(container)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await container.close()


@pytest_asyncio.fixture
async def rpc_server():
    """
    Local JSON-RPC server answering from a method -> result table.

    Yields
    ------
    SimpleNamespace
        ``url`` of the server, mutable ``results`` table and the
        list of received ``calls``
    """
    results = {}
    calls = []

    async def handle(request: web.Request) -> web.Response:
        payload = await request.json()
        calls.append(payload)
        method = payload["method"]
        if method not in results:
            return web.json_response({
                "jsonrpc": "2.0",
                "id": payload["id"],
                "error": {"code": -32601, "message": f"method {method} not found"}
            })
        return web.json_response({"jsonrpc": "2.0", "id": payload["id"], "result": results[method]})

    app = web.Application()
    app.router.add_post("/", handle)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    host, port = runner.addresses[0][:2]

    yield SimpleNamespace(url=f"http://{host}:{port}/", results=results, calls=calls)

    await runner.cleanup()
