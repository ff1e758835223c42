"""Codec for the ``[lower, higher]`` word pairs the node uses for 64-bit values."""
from typing import Any, List

_WORD = 1 << 32


def _is_word(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < _WORD


def decode(words: Any) -> int:
    """Decode a wire integer array into a Python int.

    Args:
        words: JSON value expected to be ``[lower, higher]``, two unsigned 32-bit ints

    Returns:
        The unsigned 64-bit value ``higher << 32 | lower``

    Raises:
        ValueError: If ``words`` is not a pair of unsigned 32-bit integers
    """
    if not isinstance(words, list) or len(words) != 2:
        raise ValueError(f"Expected a [lower, higher] pair, got {words!r}")
    lower, higher = words
    if not (_is_word(lower) and _is_word(higher)):
        raise ValueError(f"Words must be unsigned 32-bit integers, got {words!r}")
    return (higher << 32) | lower


def encode(value: int) -> List[int]:
    """Encode an unsigned 64-bit int as ``[lower, higher]``.

    Raises:
        ValueError: If ``value`` does not fit in 64 unsigned bits
    """
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < _WORD * _WORD:
        raise ValueError(f"Value out of uint64 range: {value!r}")
    return [value & (_WORD - 1), value >> 32]
