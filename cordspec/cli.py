import argparse
import json
import logging
from pathlib import Path

from .chain_spec import CHAIN_FACTORIES, load_spec
from .config import SS58_FORMAT
from .errors import ConfigurationError
from .keys import KeyScheme, derive_account_id, derive_key
from .runtime import WasmFileProvider

DEFAULT_RUNTIME = "target/release/wbuild/cord-runtime/cord_runtime.compact.compressed.wasm"


def ss58_format_arg(value: str) -> int:
    try:
        fmt = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid address format {value!r}")
    if not 0 <= fmt <= 16383 or fmt in (46, 47):
        raise argparse.ArgumentTypeError(f"unsupported SS58 address format {fmt}")
    return fmt


def cmd_build_spec(args: argparse.Namespace) -> None:
    try:
        spec = load_spec(args.chain, WasmFileProvider(args.runtime))
        output = spec.to_json()
    except ConfigurationError as exc:
        raise SystemExit(str(exc))

    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        logging.info("wrote %s chain spec to %s", spec.id, args.output)
    else:
        print(output)


def cmd_inspect_key(args: argparse.Namespace) -> None:
    scheme = KeyScheme[args.scheme.upper()]
    try:
        public = derive_key(scheme, args.seed).public
    except ConfigurationError as exc:
        raise SystemExit(str(exc))

    info = {
        "scheme": scheme.name.lower(),
        "keyTypeId": scheme.value,
        "publicKey": "0x" + public.hex(),
        "ss58Address": public.to_ss58(args.ss58_format),
    }
    if scheme is KeyScheme.ACCOUNT:
        info["accountId"] = str(derive_account_id(public))
    print(json.dumps(info, indent=2))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cord-spec", description="CORD chain spec builder")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_build = sub.add_parser("build-spec", help="Print the chain spec for a profile")
    p_build.add_argument("--chain", default="dev", choices=sorted(CHAIN_FACTORIES))
    p_build.add_argument("--runtime", default=DEFAULT_RUNTIME, help="Path to the runtime wasm blob")
    p_build.add_argument("--output", help="Write the spec to this file instead of stdout")
    p_build.set_defaults(func=cmd_build_spec)

    p_inspect = sub.add_parser("inspect-key", help="Show the public key derived from a seed")
    p_inspect.add_argument("seed", help="Secret URI, e.g. //Alice//stash")
    p_inspect.add_argument(
        "--scheme",
        default="account",
        choices=[s.name.lower() for s in KeyScheme],
    )
    p_inspect.add_argument("--ss58-format", type=ss58_format_arg, default=SS58_FORMAT)
    p_inspect.set_defaults(func=cmd_inspect_key)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


__all__ = [
    "main",
    "build_parser",
    "cmd_build_spec",
    "cmd_inspect_key",
]


if __name__ == "__main__":  # pragma: no cover - manual execution
    main()
