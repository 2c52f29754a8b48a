"""Classify and validate sanitized SSH public key text.

``parse_and_validate`` is total: every input yields a ParsedKey, and a key
that fails at any step (unknown identifier, bad base64, truncated blob, tag
mismatch, primitive rejects the numbers) is simply ``valid=False``. The
failure reason is kept on the result for logging only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import load_settings
from .crypto.keyloader import KeyDecodeError, load_public_blob
from .crypto.technologies import Technology, technology_for_identifier
from .crypto.wire import WireFormatError, b64decode_strict
from .obs.prom import record_parse
from .utils.logging import get_logger

log = get_logger()


@dataclass(frozen=True)
class ParsedKey:
    raw_text: object
    technology: Optional[Technology] = None
    bits: Optional[int] = None
    valid: bool = False
    blob: Optional[bytes] = None
    comment: Optional[str] = None
    reason: Optional[str] = None


def _invalid(text, reason: str, technology: Technology | None = None) -> ParsedKey:
    ident = text.split(None, 1)[0][:32] if isinstance(text, str) and text.strip() else ""
    length = len(text) if isinstance(text, (str, bytes)) else 0
    log.debug("invalid key (identifier=%r, length=%d): %s", ident, length, reason)
    record_parse(technology.name.value if technology else None, False)
    return ParsedKey(raw_text=text, reason=reason)


def parse_and_validate(sanitized_text) -> ParsedKey:
    if not isinstance(sanitized_text, str):
        return _invalid(sanitized_text, "key text is not a string")
    if len(sanitized_text) > load_settings().max_key_length:
        return _invalid(sanitized_text, "key text exceeds maximum length")

    parts = sanitized_text.split(None, 2)
    if len(parts) < 2:
        return _invalid(sanitized_text, "missing identifier or payload")
    identifier, payload = parts[0], parts[1]
    comment = parts[2].strip() if len(parts) == 3 else None

    tech = technology_for_identifier(identifier)
    if tech is None:
        return _invalid(sanitized_text, "unrecognised key identifier")

    try:
        blob = b64decode_strict(payload)
        material = load_public_blob(tech, identifier, blob)
    except (WireFormatError, KeyDecodeError) as e:
        return _invalid(sanitized_text, str(e), tech)

    record_parse(tech.name.value, True)
    return ParsedKey(
        raw_text=sanitized_text,
        technology=tech,
        bits=material.bits,
        valid=True,
        blob=blob,
        comment=comment or None,
    )


__all__ = ["ParsedKey", "parse_and_validate"]
