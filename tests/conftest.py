import httpx
import pytest

from catapult.blockchain import BlockchainClient

NODE_URL = "http://localhost:3000"

HASH = "AB" * 32
GENERATION_HASH = "CD" * 32
SIGNATURE = "EF" * 64
SIGNER = "321DE652C4D3362FC2DDF7800F6582F4A10CFEA134B81F8AB6E4BE78BBA4D18E"
RECIPIENT = "9050B9837EFAB4BBE8A4B9BB32D812F9885C00D8FC1650E142"


class FakeNode:
    """Serves canned responses keyed on request path and query."""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        target = request.url.raw_path.decode()
        if target not in self.routes:
            return httpx.Response(404, text='{"code":"ResourceNotFound"}')
        route = self.routes[target]
        if isinstance(route, Exception):
            raise route
        if isinstance(route, tuple):
            status, text = route
            return httpx.Response(status, text=text)
        return httpx.Response(200, json=route)

    def paths(self):
        return [request.url.raw_path.decode() for request in self.requests]


@pytest.fixture
def block_payload():
    return {
        "meta": {
            "hash": HASH,
            "generationHash": GENERATION_HASH,
            "totalFee": [0, 0],
            "numTransactions": 25,
        },
        "block": {
            "signature": SIGNATURE,
            "signer": SIGNER,
            "version": 36867,
            "type": 32835,
            "height": [1, 0],
            "timestamp": [0, 0],
            "difficulty": [276447232, 23283],
            "previousBlockHash": "00" * 32,
            "blockTransactionsHash": "70" * 32,
        },
    }


@pytest.fixture
def transfer_payload():
    return {
        "meta": {
            "height": [1, 0],
            "hash": "11" * 32,
            "merkleComponentHash": "22" * 32,
            "index": 0,
            "id": "5A0069D83F17CF0001777E55",
        },
        "transaction": {
            "signature": SIGNATURE,
            "signer": SIGNER,
            "version": 36867,
            "type": 16724,
            "fee": [0, 0],
            "deadline": [1, 0],
            "recipient": RECIPIENT,
            "message": {"type": 0, "payload": "746573742d6d657373616765"},
            "mosaics": [{"id": [3646934825, 3576016193], "amount": [100, 0]}],
        },
    }


@pytest.fixture
def namespace_payload():
    return {
        "meta": {
            "height": [1, 0],
            "hash": "33" * 32,
            "merkleComponentHash": "44" * 32,
            "index": 1,
            "id": "5A0069D83F17CF0001777E56",
        },
        "transaction": {
            "signature": SIGNATURE,
            "signer": SIGNER,
            "version": 36866,
            "type": 16718,
            "fee": [0, 0],
            "deadline": [1, 0],
            "namespaceType": 0,
            "namespaceId": [929036875, 2226345261],
            "name": "nem",
            "duration": [0, 0],
        },
    }


@pytest.fixture
def aggregate_payload(transfer_payload):
    inner = {
        "meta": {
            "height": [18160, 0],
            "aggregateHash": "55" * 32,
            "aggregateId": "5A0069D83F17CF0001777E57",
            "index": 0,
            "id": "5A0069D83F17CF0001777E58",
        },
        "transaction": {
            key: value
            for key, value in transfer_payload["transaction"].items()
            if key not in ("signature", "fee", "deadline")
        },
    }
    return {
        "meta": {
            "height": [18160, 0],
            "hash": "55" * 32,
            "merkleComponentHash": "55" * 32,
            "index": 2,
            "id": "5A0069D83F17CF0001777E57",
        },
        "transaction": {
            "signature": SIGNATURE,
            "signer": SIGNER,
            "version": 36866,
            "type": 16705,
            "fee": [0, 0],
            "deadline": [3266625578, 11],
            "cosignatures": [{"signature": "99" * 64, "signer": "88" * 32}],
            "transactions": [inner],
        },
    }


@pytest.fixture
def fake_node():
    """Build a BlockchainClient talking to a FakeNode with the given routes."""
    def make(routes, **kwargs):
        node = FakeNode(routes)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(node.handler))
        return node, BlockchainClient(NODE_URL, http_client=http_client, **kwargs)
    return make
