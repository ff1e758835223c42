"""Account and network models."""
from dataclasses import dataclass
from enum import IntEnum

from hexbytes import HexBytes


class NetworkType(IntEnum):
    """Network a node belongs to, as encoded in the high byte of entity versions."""
    MAIN_NET = 0x68
    TEST_NET = 0x98
    MIJIN = 0x60
    MIJIN_TEST = 0x90

    @classmethod
    def from_name(cls, name: str) -> 'NetworkType':
        """Map the name reported by ``GET /network`` to a network type.

        Raises:
            ValueError: If the name is not a known network
        """
        try:
            return _NETWORK_NAMES[name]
        except KeyError:
            raise ValueError(f"Unknown network name: {name!r}") from None


_NETWORK_NAMES = {
    'public': NetworkType.MAIN_NET,
    'publicTest': NetworkType.TEST_NET,
    'mijin': NetworkType.MIJIN,
    'mijinTest': NetworkType.MIJIN_TEST,
}


@dataclass(frozen=True)
class PublicAccount:
    """Public key scoped to a network."""
    public_key: HexBytes
    network_type: NetworkType
