"""Blockchain REST client implementation."""
import logging
from typing import List, Optional

import httpx

from catapult.mapping.block import map_block_info, map_height, map_score, map_storage_info
from catapult.mapping.transaction import map_transactions
from catapult.models.account import NetworkType
from catapult.models.blockchain import BlockchainStorageInfo, BlockInfo
from catapult.models.query import QueryParams
from catapult.models.transaction import Transaction
from catapult.network.client import NetworkClient
from catapult.utils.node_client import NodeClient

logger = logging.getLogger(__name__)


class BlockchainClient(NodeClient):
    """Client for querying blocks and chain state from a Catapult node."""

    def __init__(
        self,
        node_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        network_type: Optional[NetworkType] = None,
        network_client: Optional[NetworkClient] = None,
    ):
        """Initialize the blockchain client.

        Args:
            node_url: Base URL of the node, defaults to the CATAPULT_NODE_URL environment variable
            timeout: Request timeout in seconds
            http_client: Session to borrow instead of creating one
            network_type: Known network type; skips the ``/network`` lookup
            network_client: Client used to look up the network type, defaults to
                one sharing this client's session
        """
        super().__init__(node_url, timeout=timeout, http_client=http_client)
        self._network_type = network_type
        self._network_client = network_client or NetworkClient(self.node_url, http_client=self._client)

    async def get_network_type(self) -> NetworkType:
        """Get the node's network type, looking it up once and remembering it.

        Concurrent first calls may each query the node; they all store the same value.
        """
        if self._network_type is None:
            network_type = await self._network_client.get_network_type()
            logger.debug(f"Resolved network type {network_type.name} for {self.node_url}")
            self._network_type = network_type
        return self._network_type

    async def get_block_by_height(self, height: int) -> BlockInfo:
        """Get a block by its height.

        Args:
            height: Block height

        Returns:
            The decoded block

        Raises:
            TransportError: If the request fails or the node answers with an error status
            DecodeError: If the response does not have the block layout
        """
        network_type = await self.get_network_type()
        path = f"/block/{height}"
        return self._unwrap(map_block_info(await self._get(path), network_type), path)

    async def get_block_transactions(
        self, height: int, query_params: Optional[QueryParams] = None
    ) -> List[Transaction]:
        """Get the transactions of a block, in the order the node returns them.

        Args:
            height: Block height
            query_params: Optional pagination, omitted from the URL when None

        Returns:
            List of decoded transactions
        """
        query = query_params.to_url() if query_params is not None else ''
        path = f"/block/{height}/transactions{query}"
        return self._unwrap(map_transactions(await self._get(path)), path)

    async def get_blockchain_height(self) -> int:
        """Get the current chain height."""
        return self._unwrap(map_height(await self._get('/chain/height')), '/chain/height')

    async def get_blockchain_score(self) -> int:
        """Get the current chain score."""
        return self._unwrap(map_score(await self._get('/chain/score')), '/chain/score')

    async def get_blockchain_storage(self) -> BlockchainStorageInfo:
        """Get the node's storage counters."""
        return self._unwrap(map_storage_info(await self._get('/diagnostic/storage')), '/diagnostic/storage')
