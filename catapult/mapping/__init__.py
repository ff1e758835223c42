"""Response decoders mapping node JSON to domain models."""

from catapult.mapping.decoder import Decoded, FieldReader, decoder
from catapult.mapping.block import (
    map_block_info,
    map_height,
    map_network_type,
    map_score,
    map_storage_info,
)
from catapult.mapping.transaction import map_transaction, map_transactions, register

__all__ = [
    'Decoded', 'FieldReader', 'decoder',
    'map_block_info', 'map_height', 'map_network_type', 'map_score', 'map_storage_info',
    'map_transaction', 'map_transactions', 'register',
]
