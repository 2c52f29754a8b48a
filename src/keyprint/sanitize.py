"""Whitespace normalization for pasted SSH public keys.

Keys copied out of terminals and web pages pick up line breaks and stray
spaces inside the base64 payload. ``sanitize`` glues the payload back
together and keeps the identifier and trailing comment:

    "ssh-ed25519 AAAAC3Nza\\r\\nC1lZDI1NTE5AAAA  IAwx... carol@example.com"
        -> "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIAwx... carol@example.com"

Tokens after the identifier are appended to the payload until it decodes to
a complete blob for the announced family (all of its length-prefixed fields
present, nothing left over). Whatever follows is the comment, kept as written
after a single separating space. Text that cannot be put back together this way is returned
untouched.
"""
from __future__ import annotations

import re

from .config import load_settings
from .crypto.technologies import Technology, technology_for_identifier
from .crypto.wire import WireFormatError, b64decode_strict, count_fields

_B64_TOKEN = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")
_TOKEN = re.compile(r"\S+")


def _closed(payload: str, tech: Technology) -> bool:
    if len(payload) % 4:
        return False
    try:
        blob = b64decode_strict(payload)
    except WireFormatError:
        return False
    return count_fields(blob) == tech.wire_fields


def sanitize(key_content):
    if not isinstance(key_content, str):
        return key_content
    if len(key_content) > load_settings().max_key_length:
        return key_content
    tokens = list(_TOKEN.finditer(key_content))
    if len(tokens) < 2:
        return key_content
    tech = technology_for_identifier(tokens[0].group())
    if tech is None:
        return key_content

    payload = ""
    for i in range(1, len(tokens)):
        part = tokens[i].group()
        if not part or not _B64_TOKEN.match(part):
            return key_content
        payload += part
        if _closed(payload, tech):
            fields = [tokens[0].group(), payload]
            if i + 1 < len(tokens):
                # comment is kept verbatim from its first character on
                fields.append(key_content[tokens[i + 1].start():].rstrip())
            return " ".join(fields)
    return key_content


__all__ = ["sanitize"]
