#!/usr/bin/env python3
"""
PhantomMask CLI - derive per-app identities and sign with them.

Commands:
  phantommask derive <masterPrivateKey> <appId>       Derive an app identity
  phantommask sign <derivedPrivateKey> <message...>   Sign a message
  phantommask verify <signature> <publicKey> <message...>
                                                      Verify a signature
  phantommask test                                    Run protocol self-checks

WARNING: keys are passed as process arguments and derived private keys are
printed to the console. Anything with access to your shell history or
process list can read them. Use the HTTP API or the library for real keys.
"""

from __future__ import annotations

import argparse
import logging
import sys

from ..core.exceptions import PhantomMaskException
from ..core.logging import configure_logging
from ..identity import derive_app_identity, run_protocol_checks, sign_message, verify_signature
from .output import output_error, output_result, rule

logger = logging.getLogger(__name__)

USAGE_EXAMPLES = """\
Examples:
  phantommask derive <base58-key> my-app
  phantommask sign <base58-key> "Hello, PhantomMask!"
  phantommask verify <signature> <public-key> "Hello, PhantomMask!"
  phantommask test
"""


def cmd_derive(args: argparse.Namespace) -> int:
    """Derive a per-app identity from a master private key."""
    identity = derive_app_identity(args.master_private_key, args.app_id)

    output_result(
        {"appId": args.app_id, **identity.to_dict()},
        [
            "Deriving app identity...",
            "",
            f"Master private key: {args.master_private_key}",
            f"App ID: {args.app_id}",
            "",
            "Derived identity:",
            f"  Private key: {identity.private_key}",
            f"  Public key:  {identity.public_key}",
        ],
        as_json=args.json,
    )
    return 0


def cmd_sign(args: argparse.Namespace) -> int:
    """Sign a message and verify the fresh signature."""
    message = " ".join(args.message)
    result = sign_message(args.derived_private_key, message)
    valid = verify_signature(result.signature, message, result.public_key)

    output_result(
        {"message": message, **result.to_dict(), "valid": valid},
        [
            "Signing message...",
            "",
            f"Derived private key: {args.derived_private_key}",
            f'Message: "{message}"',
            "",
            "Signature result:",
            f"  Signature:  {result.signature}",
            f"  Public key: {result.public_key}",
            "",
            f"Verification: {'Valid' if valid else 'Invalid'}",
        ],
        as_json=args.json,
    )
    return 0 if valid else 1


def cmd_verify(args: argparse.Namespace) -> int:
    """Verify a signature against a message and public key."""
    message = " ".join(args.message)
    valid = verify_signature(args.signature, message, args.public_key)

    output_result(
        {"valid": valid},
        [f"Verification: {'Valid' if valid else 'Invalid'}"],
        as_json=args.json,
    )
    return 0 if valid else 1


def cmd_test(args: argparse.Namespace) -> int:
    """Run the protocol self-checks."""
    results = run_protocol_checks()
    all_passed = all(r.passed for r in results)

    lines = [rule(), "PhantomMask v1 - Protocol Tests", rule(), ""]
    for i, result in enumerate(results, 1):
        mark = "PASS" if result.passed else "FAIL"
        lines.append(f"Test {i}: {result.name} [{mark}]")
        lines.append(f"  {result.detail}")
        lines.append("")
    lines.append(rule())
    lines.append("All protocol tests passed" if all_passed else "Protocol tests FAILED")
    lines.append(rule())

    output_result(
        {"passed": all_passed, "checks": [r.to_dict() for r in results]},
        lines,
        as_json=args.json,
    )
    return 0 if all_passed else 1


COMMANDS = {
    "derive": cmd_derive,
    "sign": cmd_sign,
    "verify": cmd_verify,
    "test": cmd_test,
}


def app() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="phantommask",
        description="PhantomMask v1 - deterministic per-app identities from one master key",
        epilog=USAGE_EXAMPLES + "\nKeys given on the command line are visible to other processes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    derive_parser = subparsers.add_parser("derive", help="Derive an app identity")
    derive_parser.add_argument("master_private_key", metavar="masterPrivateKey", help="base58 master private key")
    derive_parser.add_argument("app_id", metavar="appId", help="Application identifier")

    sign_parser = subparsers.add_parser("sign", help="Sign a message with a derived private key")
    sign_parser.add_argument("derived_private_key", metavar="derivedPrivateKey", help="base58 derived private key")
    sign_parser.add_argument("message", nargs="+", help="Message words (joined with single spaces)")

    verify_parser = subparsers.add_parser("verify", help="Verify a signature")
    verify_parser.add_argument("signature", help="base58 signature")
    verify_parser.add_argument("public_key", metavar="publicKey", help="base58 public key")
    verify_parser.add_argument("message", nargs="+", help="Message words (joined with single spaces)")

    subparsers.add_parser("test", help="Run protocol self-checks")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = app()
    args = parser.parse_args(argv)

    if args.command is None:
        print("PhantomMask v1 CLI\n")
        parser.print_usage()
        print()
        print(USAGE_EXAMPLES, end="")
        return 0

    try:
        configure_logging(level="DEBUG" if args.verbose else "WARNING", json_format=False)
        return COMMANDS[args.command](args)
    except PhantomMaskException as e:
        output_error(e.message)
        return 1


if __name__ == "__main__":
    sys.exit(main())
