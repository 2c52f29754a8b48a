from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .crypto.technologies import technology
from .models import TechnologyInfo
from .public_key import PublicKey
from .sanitize import sanitize


def _read_input(args: argparse.Namespace) -> str:
    if args.input:
        return Path(args.input).read_text(encoding="utf-8")
    return sys.stdin.read()


def cmd_inspect(args: argparse.Namespace) -> int:
    key = PublicKey(_read_input(args))
    print(key.report().model_dump_json(indent=2 if args.pretty else None))
    return 0 if key.valid else 1


def cmd_sanitize(args: argparse.Namespace) -> int:
    print(sanitize(_read_input(args)))
    return 0


def cmd_sizes(args: argparse.Namespace) -> int:
    tech = technology(args.name)
    if tech is None:
        print(json.dumps({"error": f"unknown technology: {args.name}"}), file=sys.stderr)
        return 1
    info = TechnologyInfo(
        name=tech.name.value,
        supported_sizes=list(tech.supported_sizes),
        identifiers=list(tech.identifiers),
    )
    print(info.model_dump_json())
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser("keyprint")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_inspect = sub.add_parser("inspect")
    p_inspect.add_argument("--input", help="file holding the key (default: stdin)")
    p_inspect.add_argument("--pretty", action="store_true")
    p_inspect.set_defaults(func=cmd_inspect)

    p_san = sub.add_parser("sanitize")
    p_san.add_argument("--input", help="file holding the key (default: stdin)")
    p_san.set_defaults(func=cmd_sanitize)

    p_sizes = sub.add_parser("sizes")
    p_sizes.add_argument("name", help="rsa, dsa, ecdsa or ed25519")
    p_sizes.set_defaults(func=cmd_sizes)

    args = p.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
