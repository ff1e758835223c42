"""Decoding of transaction payloads, dispatched on the ``type`` discriminator."""
import base64
import logging
from typing import Any, Callable, Dict, List, Optional

from catapult.exceptions import DecodeError
from catapult.mapping.decoder import HASH_SIZE, KEY_SIZE, SIGNATURE_SIZE, FieldReader, decoder
from catapult.models.account import NetworkType, PublicAccount
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

logger = logging.getLogger(__name__)

ADDRESS_SIZE = 25

TransactionDecoder = Callable[[FieldReader, Dict[str, Any]], Transaction]

_DECODERS: Dict[int, TransactionDecoder] = {}


def register(*types: TransactionType) -> Callable[[TransactionDecoder], TransactionDecoder]:
    """Register a decoder for one or more transaction types.

    The decoder receives the ``transaction`` object and the already decoded
    common fields, and returns the concrete transaction.
    """
    def wrap(func: TransactionDecoder) -> TransactionDecoder:
        for transaction_type in types:
            _DECODERS[transaction_type] = func
        return func
    return wrap


def _enum(enum_cls, value: int, reader: FieldReader, name: str):
    try:
        return enum_cls(value)
    except ValueError as e:
        raise reader.error(name, f"unknown {enum_cls.__name__} {value}") from e


def _read_info(meta: FieldReader) -> TransactionInfo:
    if meta.has('aggregateHash'):
        return TransactionInfo(
            height=meta.get_uint64('height'),
            index=meta.get_int('index'),
            id=meta.get_str('id'),
            aggregate_hash=meta.get_hex('aggregateHash', HASH_SIZE),
            aggregate_id=meta.get_str('aggregateId'),
        )
    return TransactionInfo(
        height=meta.get_uint64('height'),
        index=meta.get_int('index'),
        id=meta.get_str('id'),
        hash=meta.get_hex('hash', HASH_SIZE),
        merkle_component_hash=meta.get_hex('merkleComponentHash', HASH_SIZE),
    )


def _read_common(body: FieldReader, info: Optional[TransactionInfo]) -> Dict[str, Any]:
    raw_version = body.get_int('version')
    network_type = _enum(NetworkType, raw_version >> 8, body, 'version')
    return {
        'type': body.get_int('type'),
        'network_type': network_type,
        'version': raw_version & 0xFF,
        # embedded transactions are signed by the aggregate
        'signature': body.get_hex('signature', SIGNATURE_SIZE) if body.has('signature') else None,
        'signer': PublicAccount(body.get_hex('signer', KEY_SIZE), network_type),
        'fee': body.get_uint64('fee') if body.has('fee') else 0,
        'deadline': body.get_uint64('deadline') if body.has('deadline') else 0,
        'transaction_info': info,
    }


def _read_transaction(item: FieldReader) -> Transaction:
    body = item.get_object('transaction')
    info = _read_info(item.get_object('meta')) if item.has('meta') else None
    common = _read_common(body, info)
    decode = _DECODERS.get(common['type'])
    if decode is None:
        logger.debug(f"No decoder for transaction type {common['type']:#06x}")
        return UnknownTransaction(**common, raw=dict(body.payload))
    return decode(body, common)


@register(TransactionType.TRANSFER)
def _read_transfer(body: FieldReader, common: Dict[str, Any]) -> TransferTransaction:
    message = None
    if body.has('message'):
        reader = body.get_object('message')
        # encrypted and other non-plain messages are arbitrary bytes
        message = Message(type=reader.get_int('type'), payload=reader.get_hex('payload'))

    return TransferTransaction(
        **common,
        recipient=base64.b32encode(bytes(body.get_hex('recipient', ADDRESS_SIZE))).decode('ascii'),
        mosaics=tuple(
            Mosaic(id=mosaic.get_uint64('id'), amount=mosaic.get_uint64('amount'))
            for mosaic in body.get_objects('mosaics')
        ),
        message=message,
    )


@register(TransactionType.REGISTER_NAMESPACE)
def _read_register_namespace(body: FieldReader, common: Dict[str, Any]) -> RegisterNamespaceTransaction:
    namespace_type = _enum(NamespaceType, body.get_int('namespaceType'), body, 'namespaceType')
    return RegisterNamespaceTransaction(
        **common,
        namespace_type=namespace_type,
        namespace_id=body.get_uint64('namespaceId'),
        name=body.get_str('name'),
        duration=body.get_uint64('duration') if namespace_type == NamespaceType.ROOT else None,
        parent_id=body.get_uint64('parentId') if namespace_type == NamespaceType.SUB else None,
    )


@register(TransactionType.MOSAIC_SUPPLY_CHANGE)
def _read_mosaic_supply_change(body: FieldReader, common: Dict[str, Any]) -> MosaicSupplyChangeTransaction:
    return MosaicSupplyChangeTransaction(
        **common,
        mosaic_id=body.get_uint64('mosaicId'),
        direction=_enum(MosaicSupplyType, body.get_int('direction'), body, 'direction'),
        delta=body.get_uint64('delta'),
    )


@register(TransactionType.AGGREGATE_COMPLETE, TransactionType.AGGREGATE_BONDED)
def _read_aggregate(body: FieldReader, common: Dict[str, Any]) -> AggregateTransaction:
    network_type = common['network_type']
    cosignatures = ()
    if body.has('cosignatures'):
        cosignatures = tuple(
            Cosignature(
                signer=PublicAccount(cosignature.get_hex('signer', KEY_SIZE), network_type),
                signature=cosignature.get_hex('signature', SIGNATURE_SIZE),
            )
            for cosignature in body.get_objects('cosignatures')
        )
    return AggregateTransaction(
        **common,
        inner_transactions=tuple(_read_transaction(inner) for inner in body.get_objects('transactions')),
        cosignatures=cosignatures,
    )


@decoder
def map_transaction(payload: Any) -> Transaction:
    """Decode one ``{"meta": ..., "transaction": ...}`` element."""
    return _read_transaction(FieldReader(payload))


@decoder
def map_transactions(payload: Any) -> List[Transaction]:
    """Decode a JSON array of transactions, keeping the server's order.

    Returns:
        Decoded[List[Transaction]]; a single bad element fails the whole list
    """
    if not isinstance(payload, list):
        raise DecodeError(
            f"Expected a JSON array of transactions, got {type(payload).__name__}",
            payload=payload,
        )
    return [_read_transaction(FieldReader(item, f"[{i}]")) for i, item in enumerate(payload)]
