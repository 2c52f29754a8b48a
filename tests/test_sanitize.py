import pytest
from hypothesis import given, settings, strategies as st

from keyprint.sanitize import sanitize

import keydata

CLEAN_KEYS = [
    keydata.RSA2048,
    keydata.RSA4096,
    keydata.DSA2048,
    keydata.ECDSA256,
    keydata.ECDSA384,
    keydata.ECDSA521,
    keydata.ED25519,
]


def _insert(text: str, index: int, chunk: str) -> str:
    return text[:index] + chunk + text[index:]


def test_removes_blank_space_inside_payload():
    content = keydata.RSA2048
    unsanitized = _insert(_insert(_insert(content, 100, "\n"), 40, "\r\n"), 30, " ")

    sanitized = sanitize(unsanitized)
    _, body, *_ = sanitized.split()

    assert sanitized != unsanitized
    assert not any(c.isspace() for c in body)
    assert sanitized == content


@pytest.mark.parametrize("key", CLEAN_KEYS)
def test_clean_key_is_unchanged(key):
    assert sanitize(key) == key


def test_key_without_comment():
    key = keydata.ED25519.rsplit(" ", 1)[0]
    broken = key[:20] + "\n" + key[20:]
    assert sanitize(broken) == key


def test_multi_word_comment_is_kept_verbatim():
    key = keydata.ED25519 + "  laptop\n(work)"
    ident, payload, _ = keydata.ED25519.split()
    broken = f"{ident} {payload[:10]}\n{payload[10:]}\t\tcarol@example.com  laptop\n(work)\n"
    assert sanitize(broken) == f"{ident} {payload} carol@example.com  laptop\n(work)"
    assert sanitize(key) == key
    assert sanitize(sanitize(broken)) == sanitize(broken)


@pytest.mark.parametrize("key", [keydata.RSA4096, keydata.ECDSA521])
@pytest.mark.parametrize("split,gap", [(-2, "\n"), (-1, " "), (-3, "\r\n")])
def test_padding_on_its_own_token_is_rejoined(key, split, gap):
    ident, payload, *comment = key.split(" ")
    assert payload.endswith("==")
    broken = " ".join([ident, payload[:split] + gap + payload[split:], *comment])
    assert sanitize(broken) == key


def test_unknown_prefix_is_returned_unchanged():
    unsanitized = "ssh-foo any content=="
    assert sanitize(unsanitized) == unsanitized


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "ssh-rsa",
        "this is not a key",
        "ssh-rsa AAAA AAAA",
        "ssh-ed25519 AAAAC3Nza!C1lZDI1NTE5 comment",
    ],
)
def test_unrecoverable_text_is_returned_unchanged(text):
    assert sanitize(text) == text


def test_non_string_passes_through():
    assert sanitize(None) is None
    assert sanitize(b"ssh-rsa AAAA") == b"ssh-rsa AAAA"


def test_overlong_text_passes_through(monkeypatch):
    monkeypatch.setenv("KEYPRINT_MAX_KEY_LENGTH", "64")
    broken = keydata.ED25519[:30] + "\n" + keydata.ED25519[30:]
    assert sanitize(broken) == broken


whitespace = st.sampled_from([" ", "\n", "\r\n", "\t", "  \n\t "])


@settings(max_examples=75)
@given(
    key=st.sampled_from(CLEAN_KEYS),
    cuts=st.lists(st.tuples(st.floats(min_value=0, max_value=1), whitespace), min_size=1, max_size=6),
)
def test_whitespace_injected_into_payload_is_removed(key, cuts):
    ident, payload, *comment = key.split(" ")
    pieces = []
    positions = sorted({1 + int(frac * (len(payload) - 2)) for frac, _ in cuts})
    last = 0
    for pos, (_, ws) in zip(positions, cuts):
        pieces.append(payload[last:pos])
        pieces.append(ws)
        last = pos
    pieces.append(payload[last:])
    unsanitized = " ".join([ident, "".join(pieces), *comment])

    sanitized = sanitize(unsanitized)

    assert sanitized != unsanitized
    fields = sanitized.split()
    assert len(fields) in (2, 3)
    assert fields[1] == payload
    assert sanitized == key


@given(st.text(max_size=200))
def test_idempotent_for_arbitrary_text(text):
    once = sanitize(text)
    assert sanitize(once) == once


@given(prefix=st.sampled_from(["ssh-rsa", "ssh-dss", "ecdsa-sha2-nistp256", "ssh-ed25519"]),
       rest=st.text(alphabet="ABCDEFabcdef0123456789+/= \n", max_size=120))
def test_idempotent_for_known_prefixes(prefix, rest):
    text = f"{prefix} {rest}"
    once = sanitize(text)
    assert sanitize(once) == once
