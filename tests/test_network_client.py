import httpx
import pytest

from catapult.exceptions import DecodeError, TransportError
from catapult.models import NetworkType
from catapult.network import NetworkClient
from tests.conftest import NODE_URL, FakeNode


def make_client(routes):
    node = FakeNode(routes)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(node.handler))
    return node, NetworkClient(NODE_URL + "/", http_client=http_client)


class TestNetworkClient:
    @pytest.mark.asyncio
    async def test_get_network_type(self):
        node, client = make_client({"/network": {"name": "publicTest", "description": "test network"}})

        assert await client.get_network_type() == NetworkType.TEST_NET
        assert str(node.requests[0].url) == NODE_URL + "/network"

    @pytest.mark.asyncio
    async def test_unknown_network(self):
        _, client = make_client({"/network": {"name": "moon"}})

        with pytest.raises(DecodeError) as exc_info:
            await client.get_network_type()
        assert exc_info.value.field == "name"

    @pytest.mark.asyncio
    async def test_node_error(self):
        _, client = make_client({"/network": (503, "unavailable")})

        with pytest.raises(TransportError) as exc_info:
            await client.get_network_type()
        assert exc_info.value.status_code == 503
