"""Blockchain query client module."""

from catapult.blockchain.client import BlockchainClient

__all__ = ['BlockchainClient']
