import base64
import hashlib

def md5_fingerprint(blob: bytes) -> str:
    # legacy OpenSSH presentation: 16 lowercase hex octets joined by ':'
    hexd = hashlib.md5(blob, usedforsecurity=False).hexdigest()
    return ":".join(hexd[i:i + 2] for i in range(0, len(hexd), 2))

def sha256_b64(data: bytes) -> str:
    return base64.b64encode(hashlib.sha256(data).digest()).decode()

def sha256_fingerprint(blob: bytes) -> str:
    # expects the decoded key blob; renders 'SHA256:<base64 without padding>'
    return "SHA256:" + sha256_b64(blob).rstrip("=")
