"""투사체 네임스페이스"""

from dataclasses import dataclass

from .entity import Entity


@dataclass(eq=False)
class Projectile(Entity):
    pass


@dataclass(eq=False)
class Arrow(Projectile):
    pass


@dataclass(eq=False)
class Snowball(Projectile):
    pass


@dataclass(eq=False)
class ThrownEgg(Projectile):
    pass


@dataclass(eq=False)
class EnderPearl(Projectile):
    pass


@dataclass(eq=False)
class Fireball(Projectile):
    pass


@dataclass(eq=False)
class SmallFireball(Fireball):
    pass


__all__ = [
    "Projectile",
    "Arrow",
    "Snowball",
    "ThrownEgg",
    "EnderPearl",
    "Fireball",
    "SmallFireball",
]
