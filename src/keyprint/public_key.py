"""Public entry point: one SSH public key, validated and fingerprinted.

    key = PublicKey(text)
    key.valid        -> bool
    key.type         -> TechnologyName | None
    key.bits         -> int | None
    key.fingerprint  -> "aa:bb:..." | None
    key.key_text     -> text exactly as supplied

Everything is computed in the constructor; the accessors only read.
Construction never raises.
"""
from __future__ import annotations

from typing import Optional

from .crypto.digest import md5_fingerprint, sha256_fingerprint
from .crypto.technologies import Technology, TechnologyName
from .models import KeyReport
from .parser import ParsedKey, parse_and_validate
from .sanitize import sanitize
from .utils.ct import fingerprints_match


class PublicKey:
    __slots__ = ("_key_text", "_parsed", "_fingerprint", "_fingerprint_sha256")

    def __init__(self, key_text):
        self._key_text = key_text
        self._parsed: ParsedKey = parse_and_validate(sanitize(key_text))
        blob = self._parsed.blob
        self._fingerprint = md5_fingerprint(blob) if self._parsed.valid and blob else None
        self._fingerprint_sha256 = sha256_fingerprint(blob) if self._parsed.valid and blob else None

    @property
    def valid(self) -> bool:
        return self._parsed.valid

    @property
    def technology(self) -> Optional[Technology]:
        return self._parsed.technology

    @property
    def type(self) -> Optional[TechnologyName]:
        tech = self._parsed.technology
        return tech.name if tech else None

    @property
    def bits(self) -> Optional[int]:
        return self._parsed.bits

    @property
    def fingerprint(self) -> Optional[str]:
        return self._fingerprint

    @property
    def fingerprint_sha256(self) -> Optional[str]:
        return self._fingerprint_sha256

    @property
    def comment(self) -> Optional[str]:
        return self._parsed.comment

    @property
    def key_text(self):
        return self._key_text

    def matches_fingerprint(self, other) -> bool:
        if self._fingerprint is None:
            return False
        return fingerprints_match(self._fingerprint, other)

    def report(self) -> KeyReport:
        tech = self._parsed.technology
        return KeyReport(
            valid=self.valid,
            type=tech.name.value if tech else None,
            bits=self.bits,
            fingerprint=self.fingerprint,
            fingerprint_sha256=self.fingerprint_sha256,
            comment=self.comment,
            supported_sizes=list(tech.supported_sizes) if tech else [],
        )

    def __repr__(self) -> str:
        if not self.valid:
            return "<PublicKey invalid>"
        return f"<PublicKey {self.type} {self.bits} {self.fingerprint}>"


__all__ = ["PublicKey"]
