"""Domain models decoded from node responses."""

from catapult.models.account import NetworkType, PublicAccount
from catapult.models.blockchain import BlockInfo, BlockchainStorageInfo
from catapult.models.query import Order, QueryParams
from catapult.models.transaction import (
    AggregateTransaction,
    Cosignature,
    Message,
    Mosaic,
    MosaicSupplyChangeTransaction,
    MosaicSupplyType,
    NamespaceType,
    RegisterNamespaceTransaction,
    Transaction,
    TransactionInfo,
    TransactionType,
    TransferTransaction,
    UnknownTransaction,
)

__all__ = [
    'NetworkType', 'PublicAccount',
    'BlockInfo', 'BlockchainStorageInfo',
    'Order', 'QueryParams',
    'AggregateTransaction', 'Cosignature', 'Message', 'Mosaic',
    'MosaicSupplyChangeTransaction', 'MosaicSupplyType', 'NamespaceType',
    'RegisterNamespaceTransaction', 'Transaction', 'TransactionInfo',
    'TransactionType', 'TransferTransaction', 'UnknownTransaction',
]
