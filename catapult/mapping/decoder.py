"""Field-checked reading of JSON payloads and the tagged result decoders return."""
import functools
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from hexbytes import HexBytes

from catapult.exceptions import DecodeError
from catapult.utils import uint64

T = TypeVar('T')

HASH_SIZE = 32
KEY_SIZE = 32
SIGNATURE_SIZE = 64


@dataclass(frozen=True)
class Decoded(Generic[T]):
    """Outcome of decoding a payload: either a value or the error that prevented it."""
    value: Optional[T] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the decoded value.

        Raises:
            DecodeError: If decoding failed
        """
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, value: T) -> 'Decoded[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: DecodeError) -> 'Decoded[T]':
        return cls(error=error)


def decoder(func: Callable[..., T]) -> Callable[..., Decoded[T]]:
    """Turn a decoding function that raises DecodeError into one returning Decoded."""
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Decoded[T]:
        try:
            return Decoded.success(func(*args, **kwargs))
        except DecodeError as e:
            return Decoded.failure(e)
    return wrapper


class FieldReader:
    """Typed accessor over a JSON object that reports the dotted path of bad fields."""

    def __init__(self, payload: Any, path: str = ''):
        if not isinstance(payload, dict):
            raise DecodeError(
                f"Expected a JSON object at {path or '<root>'}, got {type(payload).__name__}",
                field=path or None,
                payload=payload,
            )
        self.payload: Dict[str, Any] = payload
        self.path = path

    def _path(self, name: str) -> str:
        return f"{self.path}.{name}" if self.path else name

    def error(self, name: str, message: str) -> DecodeError:
        """Build a DecodeError pointing at ``name`` within this object."""
        return DecodeError(f"{self._path(name)}: {message}", field=self._path(name), payload=self.payload)

    def has(self, name: str) -> bool:
        return self.payload.get(name) is not None

    def get_raw(self, name: str) -> Any:
        if name not in self.payload:
            raise self.error(name, "missing field")
        return self.payload[name]

    def get_object(self, name: str) -> 'FieldReader':
        return FieldReader(self.get_raw(name), self._path(name))

    def get_list(self, name: str) -> List[Any]:
        value = self.get_raw(name)
        if not isinstance(value, list):
            raise self.error(name, f"expected an array, got {type(value).__name__}")
        return value

    def get_objects(self, name: str) -> List['FieldReader']:
        return [FieldReader(item, f"{self._path(name)}[{i}]") for i, item in enumerate(self.get_list(name))]

    def get_str(self, name: str) -> str:
        value = self.get_raw(name)
        if not isinstance(value, str):
            raise self.error(name, f"expected a string, got {type(value).__name__}")
        return value

    def get_int(self, name: str) -> int:
        value = self.get_raw(name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise self.error(name, f"expected an integer, got {value!r}")
        return value

    def get_uint64(self, name: str) -> int:
        try:
            return uint64.decode(self.get_raw(name))
        except ValueError as e:
            raise self.error(name, str(e)) from e

    def get_hex(self, name: str, size: Optional[int] = None) -> HexBytes:
        value = self.get_str(name)
        try:
            data = HexBytes(value)
        except ValueError as e:
            raise self.error(name, f"invalid hex string {value!r}") from e
        if size is not None and len(data) != size:
            raise self.error(name, f"expected {size} bytes, got {len(data)}")
        return data
