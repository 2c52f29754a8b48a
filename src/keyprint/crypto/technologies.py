"""Technology registry for SSH public keys.

Supported families:
  - rsa      (ssh-rsa)                         1024 / 2048 / 3072 / 4096
  - dsa      (ssh-dss)                         1024 / 2048 / 3072
  - ecdsa    (ecdsa-sha2-nistp256|384|521)     256 / 384 / 521
  - ed25519  (ssh-ed25519)                     256

The catalog is built once at import and never mutated, so lookups are safe
from any number of threads without locking.

Helpers:
  technology(name) -> Technology | None
  supported_sizes(name) -> list[int]
  technologies() -> iterator over the four entries
  technology_for_identifier(token) -> Technology | None
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class TechnologyName(str, Enum):
    RSA = "rsa"
    DSA = "dsa"
    ECDSA = "ecdsa"
    ED25519 = "ed25519"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Technology:
    name: TechnologyName
    supported_sizes: Tuple[int, ...]
    identifying_prefix: str
    identifiers: Tuple[str, ...]
    # number of length-prefixed fields in the public key blob, tag included
    wire_fields: int

    def matches(self, token: str) -> bool:
        return token in self.identifiers


_TECHNOLOGIES: Tuple[Technology, ...] = (
    Technology(
        name=TechnologyName.RSA,
        supported_sizes=(1024, 2048, 3072, 4096),
        identifying_prefix="ssh-rsa",
        identifiers=("ssh-rsa",),
        wire_fields=3,
    ),
    Technology(
        name=TechnologyName.DSA,
        supported_sizes=(1024, 2048, 3072),
        identifying_prefix="ssh-dss",
        identifiers=("ssh-dss",),
        wire_fields=5,
    ),
    Technology(
        name=TechnologyName.ECDSA,
        supported_sizes=(256, 384, 521),
        identifying_prefix="ecdsa-sha2-nistp",
        identifiers=("ecdsa-sha2-nistp256", "ecdsa-sha2-nistp384", "ecdsa-sha2-nistp521"),
        wire_fields=3,
    ),
    Technology(
        name=TechnologyName.ED25519,
        supported_sizes=(256,),
        identifying_prefix="ssh-ed25519",
        identifiers=("ssh-ed25519",),
        wire_fields=2,
    ),
)

_BY_NAME = {t.name.value: t for t in _TECHNOLOGIES}


def technology(name) -> Technology | None:
    if isinstance(name, TechnologyName):
        return _BY_NAME.get(name.value)
    if not isinstance(name, str):
        return None
    return _BY_NAME.get(name.strip().lower())


lookup = technology


def supported_sizes(name) -> list[int]:
    tech = technology(name)
    if tech is None:
        return []
    return list(tech.supported_sizes)


def technologies() -> Iterator[Technology]:
    yield from _TECHNOLOGIES


def technology_for_identifier(token) -> Technology | None:
    if not isinstance(token, str):
        return None
    for tech in technologies():
        if tech.matches(token):
            return tech
    return None


__all__ = [
    "Technology",
    "TechnologyName",
    "technology",
    "lookup",
    "supported_sizes",
    "technologies",
    "technology_for_identifier",
]
