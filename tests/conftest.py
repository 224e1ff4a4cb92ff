import random
import socket
from typing import Optional

import pytest
from aiohttp import web
from stellar_sdk import Account, Keypair, Network, TransactionBuilder

from core.domain.value_objects import PreparedTransaction

TEST_HASH = "d89c007e"
TEST_LEDGER = 370369


def get_free_port(start_port=8000, end_port=9000, retries=10):
    """
    Finds a free port in the specified range.
    Tries random ports and attempts to bind to them.
    """
    for _ in range(retries):
        port = random.randint(start_port, end_port)
        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.bind(('127.0.0.1', port))
            sock.close()
            return port
        except OSError:
            continue
    raise RuntimeError(f"Could not find a free port in range {start_port}-{end_port} after {retries} attempts")


@pytest.fixture(scope="function")
def web_server_config():
    port = get_free_port()
    return {"host": "127.0.0.1", "port": port, "url": f"http://127.0.0.1:{port}"}


def make_success_response(hash: str = TEST_HASH, ledger: int = TEST_LEDGER, **extra) -> dict:
    response = {
        "hash": hash,
        "ledger": ledger,
        "successful": True,
        "envelope_xdr": "AAAA...",
        "result_xdr": "AAAA...",
    }
    response.update(extra)
    return response


def make_rejection_response(transaction: str, operations: Optional[list] = None) -> dict:
    result_codes = {"transaction": transaction}
    if operations is not None:
        result_codes["operations"] = operations
    return {
        "type": "https://stellar.org/horizon-errors/transaction_failed",
        "title": "Transaction Failed",
        "status": 400,
        "detail": "The transaction failed when submitted to the stellar network.",
        "extras": {
            "envelope_xdr": "AAAA...",
            "result_codes": result_codes,
            "result_xdr": "AAAA...",
        },
    }


@pytest.fixture
def success_response():
    return make_success_response()


@pytest.fixture
def keypair():
    return Keypair.random()


@pytest.fixture
def signed_xdr(keypair):
    source_account = Account(keypair.public_key, 1)
    transaction = (
        TransactionBuilder(
            source_account=source_account,
            network_passphrase=Network.TESTNET_NETWORK_PASSPHRASE,
            base_fee=100,
        )
        .append_bump_sequence_op(bump_to=10)
        .set_timeout(180)
        .build()
    )
    transaction.sign(keypair)
    return transaction.to_xdr()


@pytest.fixture
def prepared(signed_xdr):
    return PreparedTransaction(xdr=signed_xdr, network_passphrase=Network.TESTNET_NETWORK_PASSPHRASE)


@pytest.fixture
async def mock_web(web_server_config):
    """
    Starts a local server playing Horizon, a relay and a callback endpoint.
    Responses are configured through the returned state.
    """
    routes = web.RouteTableDef()

    class WebMockState:
        def __init__(self):
            self.url = web_server_config["url"]
            self.requests = []
            self.transaction_response = make_success_response()
            self.transaction_status = 200
            self.relay_response = {"id": "vault-1"}
            self.relay_status = 201
            self.relay_raw_body = None
            self.callback_status = 200
            self.callback_reason = None

        def set_transaction_response(self, response: dict, status: int = 200):
            self.transaction_response = response
            self.transaction_status = status

        def get_requests(self, endpoint: Optional[str] = None):
            if endpoint:
                return [r for r in self.requests if r["endpoint"] == endpoint]
            return self.requests

    state = WebMockState()

    @routes.post("/transactions")
    async def submit_transaction(request):
        data = await request.post()
        state.requests.append({"endpoint": "transactions", "method": "POST", "data": dict(data)})
        return web.json_response(state.transaction_response, status=state.transaction_status)

    @routes.post("/api/transactions/")
    async def relay_transaction(request):
        data = await request.json()
        state.requests.append({"endpoint": "relay", "method": "POST", "data": data})
        if state.relay_raw_body is not None:
            return web.Response(text=state.relay_raw_body, status=state.relay_status,
                                content_type="application/json")
        return web.json_response(state.relay_response, status=state.relay_status)

    @routes.post("/callback")
    async def callback(request):
        data = await request.post()
        state.requests.append({"endpoint": "callback", "method": "POST", "data": dict(data)})
        return web.Response(text="ok", status=state.callback_status, reason=state.callback_reason)

    app = web.Application()
    app.add_routes(routes)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, web_server_config["host"], web_server_config["port"])
    await site.start()

    yield state

    await runner.cleanup()
