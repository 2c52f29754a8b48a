from pydantic import BaseModel
from typing import List, Optional, Literal

class KeyReport(BaseModel):
    valid: bool
    type: Optional[Literal["rsa", "dsa", "ecdsa", "ed25519"]] = None
    bits: Optional[int] = None
    fingerprint: Optional[str] = None
    fingerprint_sha256: Optional[str] = None
    comment: Optional[str] = None
    supported_sizes: List[int] = []

class TechnologyInfo(BaseModel):
    name: Literal["rsa", "dsa", "ecdsa", "ed25519"]
    supported_sizes: List[int]
    identifiers: List[str]
