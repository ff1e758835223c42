"""Transaction models returned by block transaction queries."""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

from hexbytes import HexBytes

from catapult.models.account import NetworkType, PublicAccount


class TransactionType(IntEnum):
    """Discriminator carried in the ``type`` field of every transaction."""
    AGGREGATE_COMPLETE = 0x4141
    AGGREGATE_BONDED = 0x4241
    MOSAIC_DEFINITION = 0x414D
    MOSAIC_SUPPLY_CHANGE = 0x424D
    REGISTER_NAMESPACE = 0x414E
    TRANSFER = 0x4154
    MODIFY_MULTISIG_ACCOUNT = 0x4155
    LOCK = 0x4148
    SECRET_LOCK = 0x4152
    SECRET_PROOF = 0x4252


class NamespaceType(IntEnum):
    ROOT = 0
    SUB = 1


class MosaicSupplyType(IntEnum):
    DECREASE = 0
    INCREASE = 1


@dataclass(frozen=True)
class TransactionInfo:
    """Where a transaction sits in the chain.

    Top-level transactions carry ``hash`` and ``merkle_component_hash``;
    transactions embedded in an aggregate carry ``aggregate_hash`` and
    ``aggregate_id`` instead.
    """
    height: int
    index: Optional[int] = None
    id: Optional[str] = None
    hash: Optional[HexBytes] = None
    merkle_component_hash: Optional[HexBytes] = None
    aggregate_hash: Optional[HexBytes] = None
    aggregate_id: Optional[str] = None

    @property
    def is_aggregate_inner(self) -> bool:
        return self.aggregate_hash is not None


@dataclass(frozen=True)
class Transaction:
    """Fields shared by every transaction kind."""
    type: int
    network_type: NetworkType
    version: int
    signature: Optional[HexBytes]
    signer: PublicAccount
    fee: int
    deadline: int
    transaction_info: Optional[TransactionInfo]


@dataclass(frozen=True)
class Mosaic:
    id: int
    amount: int


@dataclass(frozen=True)
class Message:
    """Transfer message; ``payload`` holds the raw bytes, which need not be text."""
    type: int
    payload: HexBytes

    @property
    def text(self) -> str:
        """Payload as text, with undecodable bytes replaced."""
        return bytes(self.payload).decode("utf-8", errors="replace")


@dataclass(frozen=True)
class TransferTransaction(Transaction):
    recipient: str = ''
    mosaics: Tuple[Mosaic, ...] = ()
    message: Optional[Message] = None


@dataclass(frozen=True)
class RegisterNamespaceTransaction(Transaction):
    namespace_type: NamespaceType = NamespaceType.ROOT
    namespace_id: int = 0
    name: str = ''
    duration: Optional[int] = None
    parent_id: Optional[int] = None


@dataclass(frozen=True)
class MosaicSupplyChangeTransaction(Transaction):
    mosaic_id: int = 0
    direction: MosaicSupplyType = MosaicSupplyType.INCREASE
    delta: int = 0


@dataclass(frozen=True)
class Cosignature:
    signer: PublicAccount
    signature: HexBytes


@dataclass(frozen=True)
class AggregateTransaction(Transaction):
    inner_transactions: Tuple[Transaction, ...] = ()
    cosignatures: Tuple[Cosignature, ...] = ()


@dataclass(frozen=True)
class UnknownTransaction(Transaction):
    """A transaction kind without a dedicated decoder; ``raw`` keeps its JSON."""
    raw: Dict[str, Any] = field(default_factory=dict, hash=False)
