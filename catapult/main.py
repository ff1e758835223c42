"""Main module for fetching a block together with its transactions."""
import asyncio
from typing import Any, Dict, Optional

from catapult.blockchain import BlockchainClient
from catapult.models.query import QueryParams


async def get_block_data(
    height: int,
    node_url: Optional[str] = None,
    query_params: Optional[QueryParams] = None,
) -> Dict[str, Any]:
    """Get a block and its transactions from a node.

    Args:
        height: Block height
        node_url: Optional node URL, defaults to the CATAPULT_NODE_URL environment variable
        query_params: Optional pagination for the transaction list

    Returns:
        Dictionary with the decoded ``block`` and its ``transactions``

    Raises:
        TransportError: If the node cannot be reached or answers with an error status
        DecodeError: If a response does not have the expected layout
    """
    async with BlockchainClient(node_url) as client:
        tasks = [
            asyncio.ensure_future(client.get_block_by_height(height)),
            asyncio.ensure_future(client.get_block_transactions(height, query_params)),
        ]
        try:
            block, transactions = await asyncio.gather(*tasks)
        except BaseException:
            # the sibling request must not outlive the session
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
    return {
        'block': block,
        'transactions': transactions,
    }
