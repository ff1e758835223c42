"""
Catapult client package for querying blocks, transactions and chain state.

This package provides async clients that call a Catapult node's REST API and
decode the responses into typed models.
"""

__version__ = "0.1.0"

from catapult.main import get_block_data
from catapult.blockchain import BlockchainClient
from catapult.network import NetworkClient
from catapult.exceptions import CatapultClientError, DecodeError, RequestError, TransportError
from catapult.models import NetworkType, Order, QueryParams
__all__ = [
    'get_block_data',
    'BlockchainClient',
    'NetworkClient',
    'CatapultClientError',
    'DecodeError',
    'RequestError',
    'TransportError',
    'NetworkType',
    'Order',
    'QueryParams'
]
