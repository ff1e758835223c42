import asyncio

import httpx
import pytest

import catapult.main as main_module
from catapult import get_block_data
from catapult.blockchain import BlockchainClient
from catapult.exceptions import TransportError
from tests.conftest import NODE_URL, FakeNode


def patch_client(monkeypatch, http_client):
    monkeypatch.setattr(
        main_module,
        "BlockchainClient",
        lambda node_url: BlockchainClient(node_url, http_client=http_client),
    )


class TestGetBlockData:
    @pytest.mark.asyncio
    async def test_block_with_transactions(self, monkeypatch, block_payload, transfer_payload):
        node = FakeNode({
            "/network": {"name": "mijinTest"},
            "/block/1": block_payload,
            "/block/1/transactions?pageSize=10": [transfer_payload],
        })
        patch_client(monkeypatch, httpx.AsyncClient(transport=httpx.MockTransport(node.handler)))

        data = await get_block_data(1, NODE_URL, main_module.QueryParams(page_size=10))

        assert data["block"].height == 1
        assert len(data["transactions"]) == 1
        assert sorted(node.paths()) == ["/block/1", "/block/1/transactions?pageSize=10", "/network"]

    @pytest.mark.asyncio
    async def test_failure_cancels_transactions_fetch(self, monkeypatch, transfer_payload):
        cancelled = asyncio.Event()

        async def handler(request):
            if request.url.path == "/block/1/transactions":
                try:
                    await asyncio.sleep(0.05)
                except asyncio.CancelledError:
                    cancelled.set()
                    raise
                return httpx.Response(200, json=[transfer_payload])
            return httpx.Response(404, text='{"code":"ResourceNotFound"}')

        patch_client(monkeypatch, httpx.AsyncClient(transport=httpx.MockTransport(handler)))

        with pytest.raises(TransportError) as exc_info:
            await get_block_data(1, NODE_URL)

        assert exc_info.value.status_code == 404
        assert cancelled.is_set()
        pending = [task for task in asyncio.all_tasks() if task is not asyncio.current_task()]
        assert not any("get_block_transactions" in repr(task) for task in pending)
