"""Network endpoint client."""
from catapult.mapping.block import map_network_type
from catapult.models.account import NetworkType
from catapult.utils.node_client import NodeClient


class NetworkClient(NodeClient):
    """Client for the node's ``/network`` endpoint."""

    async def get_network_type(self) -> NetworkType:
        """Get the network the node runs on.

        Returns:
            The node's network type

        Raises:
            TransportError: If the request fails
            DecodeError: If the node reports an unknown network name
        """
        return self._unwrap(map_network_type(await self._get('/network')), '/network')
