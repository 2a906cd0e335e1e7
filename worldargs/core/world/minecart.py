"""마인카트 네임스페이스"""

from dataclasses import dataclass

from .entity import Minecart


@dataclass(eq=False)
class RideableMinecart(Minecart):
    pass


@dataclass(eq=False)
class StorageMinecart(Minecart):
    pass


@dataclass(eq=False)
class PoweredMinecart(Minecart):
    pass


@dataclass(eq=False)
class ExplosiveMinecart(Minecart):
    pass


@dataclass(eq=False)
class HopperMinecart(Minecart):
    pass


@dataclass(eq=False)
class SpawnerMinecart(Minecart):
    pass


@dataclass(eq=False)
class CommandMinecart(Minecart):
    pass


__all__ = [
    "RideableMinecart",
    "StorageMinecart",
    "PoweredMinecart",
    "ExplosiveMinecart",
    "HopperMinecart",
    "SpawnerMinecart",
    "CommandMinecart",
]
