import hmac

def ct_eq(a: bytes, b: bytes) -> bool:
    """Constant-time equality for two byte strings (length must match)."""
    if len(a) != len(b):
        return False
    return hmac.compare_digest(a, b)

def fingerprints_match(a, b) -> bool:
    """Compare two colon-hex fingerprints, ignoring case and an optional 'MD5:' label."""
    if not isinstance(a, str) or not isinstance(b, str):
        return False
    def norm(fp: str) -> bytes:
        fp = fp.strip().lower()
        if fp.startswith("md5:"):
            fp = fp[4:]
        return fp.encode("utf-8", "replace")
    return ct_eq(norm(a), norm(b))
