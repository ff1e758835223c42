"""Network information client module."""

from catapult.network.client import NetworkClient

__all__ = ['NetworkClient']
