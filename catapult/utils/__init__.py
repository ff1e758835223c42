"""Shared helpers for node clients."""
