"""Decode SSH public key blobs into ``cryptography`` key objects.

One decoder per technology; each reads the wire fields that follow the
algorithm tag, hands them to the matching primitive and reports the key size:

  rsa:      string "ssh-rsa", mpint e, mpint n                    -> modulus bits
  dsa:      string "ssh-dss", mpint p, mpint q, mpint g, mpint y  -> p bits
  ecdsa:    string tag, string curve, string Q (SEC1 point)       -> curve bits
  ed25519:  string "ssh-ed25519", string A (32 bytes)             -> 256

All failures surface as KeyDecodeError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed25519, rsa

from .technologies import Technology, TechnologyName
from .wire import WireFormatError, WireReader


class KeyDecodeError(ValueError):
    """Raised when a blob cannot be decoded as a public key of the claimed family."""


_CURVES: Dict[str, ec.EllipticCurve] = {
    "nistp256": ec.SECP256R1(),
    "nistp384": ec.SECP384R1(),
    "nistp521": ec.SECP521R1(),
}


@dataclass(frozen=True)
class PublicMaterial:
    technology: Technology
    identifier: str
    key: Any
    bits: int


def _rsa(reader: WireReader, identifier: str):
    e = reader.read_mpint()
    n = reader.read_mpint()
    key = rsa.RSAPublicNumbers(e, n).public_key()
    return key, key.key_size


def _dsa(reader: WireReader, identifier: str):
    p = reader.read_mpint()
    q = reader.read_mpint()
    g = reader.read_mpint()
    y = reader.read_mpint()
    # public_key() would also enforce FIPS sizes; only the structure decides validity here
    if not (1 < q < p and 1 < g < p and 1 < y < p):
        raise KeyDecodeError("dsa parameters out of range")
    key = dsa.DSAPublicNumbers(y, dsa.DSAParameterNumbers(p, q, g))
    return key, p.bit_length()


def _ecdsa(reader: WireReader, identifier: str):
    curve_name = reader.read_text()
    if identifier.rsplit("-", 1)[-1] != curve_name:
        raise KeyDecodeError(f"curve {curve_name!r} does not match {identifier}")
    curve = _CURVES.get(curve_name)
    if curve is None:
        raise KeyDecodeError(f"unsupported curve {curve_name!r}")
    point = reader.read_string()
    key = ec.EllipticCurvePublicKey.from_encoded_point(curve, point)
    return key, key.curve.key_size


def _ed25519(reader: WireReader, identifier: str):
    key = ed25519.Ed25519PublicKey.from_public_bytes(reader.read_string())
    return key, 256


_DECODERS: Dict[TechnologyName, Callable[[WireReader, str], tuple]] = {
    TechnologyName.RSA: _rsa,
    TechnologyName.DSA: _dsa,
    TechnologyName.ECDSA: _ecdsa,
    TechnologyName.ED25519: _ed25519,
}


def load_public_blob(tech: Technology, identifier: str, blob: bytes) -> PublicMaterial:
    """Decode ``blob`` as a ``tech`` key announced with ``identifier``.

    The tag embedded in the blob must equal ``identifier``, which must itself
    belong to ``tech``.
    """
    if not tech.matches(identifier):
        raise KeyDecodeError(f"{identifier} is not a {tech.name} identifier")
    reader = WireReader(blob)
    try:
        tag = reader.read_text()
        if tag != identifier:
            raise KeyDecodeError(f"embedded tag {tag!r} does not match {identifier}")
        key, bits = _DECODERS[tech.name](reader, identifier)
        reader.finish()
    except KeyDecodeError:
        raise
    except (WireFormatError, ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyDecodeError(str(e) or e.__class__.__name__) from e
    return PublicMaterial(technology=tech, identifier=identifier, key=key, bits=bits)


__all__ = ["load_public_blob", "PublicMaterial", "KeyDecodeError"]
