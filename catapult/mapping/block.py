"""Decoders for block and chain state responses."""
from typing import Any

from catapult.exceptions import DecodeError
from catapult.mapping.decoder import HASH_SIZE, KEY_SIZE, SIGNATURE_SIZE, FieldReader, decoder
from catapult.models.account import NetworkType, PublicAccount
from catapult.models.blockchain import BlockchainStorageInfo, BlockInfo


@decoder
def map_block_info(payload: Any, network_type: NetworkType) -> BlockInfo:
    """Decode a ``GET /block/{height}`` body.

    Args:
        payload: Parsed JSON with ``meta`` and ``block`` objects
        network_type: Network the signer account is scoped to

    Returns:
        Decoded[BlockInfo]
    """
    reader = FieldReader(payload)
    meta = reader.get_object('meta')
    block = reader.get_object('block')
    return BlockInfo(
        hash=meta.get_hex('hash', HASH_SIZE),
        generation_hash=meta.get_hex('generationHash', HASH_SIZE),
        total_fee=meta.get_uint64('totalFee'),
        num_transactions=meta.get_int('numTransactions'),
        signature=block.get_hex('signature', SIGNATURE_SIZE),
        signer=PublicAccount(block.get_hex('signer', KEY_SIZE), network_type),
        network_type=network_type,
        # high byte is the network, low byte the entity version
        version=block.get_int('version') & 0xFF,
        type=block.get_int('type'),
        height=block.get_uint64('height'),
        timestamp=block.get_uint64('timestamp'),
        difficulty=block.get_uint64('difficulty'),
        previous_block_hash=block.get_hex('previousBlockHash', HASH_SIZE),
        block_transactions_hash=block.get_hex('blockTransactionsHash', HASH_SIZE),
    )


@decoder
def map_height(payload: Any) -> int:
    return FieldReader(payload).get_uint64('height')


@decoder
def map_score(payload: Any) -> int:
    """Combine ``scoreHigh`` and ``scoreLow`` into one 128-bit score."""
    reader = FieldReader(payload)
    return (reader.get_uint64('scoreHigh') << 64) | reader.get_uint64('scoreLow')


@decoder
def map_storage_info(payload: Any) -> BlockchainStorageInfo:
    reader = FieldReader(payload)
    num_blocks = reader.get_int('numBlocks')
    return BlockchainStorageInfo(
        num_accounts=reader.get_int('numAccounts'),
        num_blocks=num_blocks,
        num_transactions=num_blocks,
    )


@decoder
def map_network_type(payload: Any) -> NetworkType:
    """Decode a ``GET /network`` body such as ``{"name": "mijinTest", ...}``."""
    reader = FieldReader(payload)
    name = reader.get_str('name')
    try:
        return NetworkType.from_name(name)
    except ValueError as e:
        raise DecodeError(str(e), field='name', payload=payload) from e
