"""Block and chain state models."""
from dataclasses import dataclass

from hexbytes import HexBytes

from catapult.models.account import NetworkType, PublicAccount


@dataclass(frozen=True)
class BlockInfo:
    """A block as returned by ``GET /block/{height}``.

    Hashes, signatures and keys are raw bytes; every 64-bit quantity is
    already decoded from its wire word pair.
    """
    hash: HexBytes
    generation_hash: HexBytes
    total_fee: int
    num_transactions: int
    signature: HexBytes
    signer: PublicAccount
    network_type: NetworkType
    version: int
    type: int
    height: int
    timestamp: int
    difficulty: int
    previous_block_hash: HexBytes
    block_transactions_hash: HexBytes


@dataclass(frozen=True)
class BlockchainStorageInfo:
    """Node storage counters from ``GET /diagnostic/storage``.

    ``num_transactions`` carries the node's ``numBlocks`` value, not
    ``numTransactions``; the mapping keeps that behaviour as-is.
    """
    num_accounts: int
    num_blocks: int
    num_transactions: int
