#!/usr/bin/env python3
"""
Command-line interface for kubekey.

Provides commands to encode, decode and inspect Kubernetes resource keys.
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

import yaml

from kubekey.config import Config
from kubekey.output import OutputManager, Verbosity, get_output, set_output
from kubekey.resource_key import (
    DELIMITER,
    MalformedKeyError,
    ResourceKey,
    decode_resource_key,
    make_resource_key,
)

logger = logging.getLogger(__name__)

CLASSIFICATION_COLUMNS = [
    "Key",
    "API Version",
    "Kind",
    "Namespace",
    "Name",
    "Zero",
    "Built-in",
    "Deployment",
    "ConfigMap",
    "Secret",
]


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def classification_row(key: ResourceKey) -> List[str]:
    """Build a table row describing a key and its classification."""
    return [
        str(key),
        key.api_version,
        key.kind,
        key.namespace,
        key.name,
        _yes_no(key.is_zero()),
        _yes_no(key.is_kubernetes_builtin_resource()),
        _yes_no(key.is_deployment()),
        _yes_no(key.is_configmap()),
        _yes_no(key.is_secret()),
    ]


def load_manifests(stream: TextIO) -> List[Dict[str, Any]]:
    """
    Load manifest documents from a YAML stream.

    Handles multi-document YAML. Empty documents and documents that are not
    mappings are skipped.

    Args:
        stream: Open text stream containing YAML

    Returns:
        List of manifest dictionaries

    Raises:
        yaml.YAMLError: If the stream is not valid YAML
    """
    output = get_output()
    manifests = []
    for index, doc in enumerate(yaml.safe_load_all(stream)):
        if doc is None:
            continue
        if not isinstance(doc, dict):
            output.verbose(f"Skipping document {index}: not a mapping")
            continue
        manifests.append(doc)
    return manifests


def cmd_encode(args: argparse.Namespace) -> None:
    """Handle the encode subcommand."""
    output = get_output()
    key = ResourceKey(
        api_version=args.api_version,
        kind=args.kind,
        namespace=args.namespace,
        name=args.name,
    )

    for field, value in (
        ("api-version", key.api_version),
        ("kind", key.kind),
        ("namespace", key.namespace),
        ("name", key.name),
    ):
        if DELIMITER in value:
            output.warning(f"--{field} contains '{DELIMITER}'; the encoded key will not decode back")

    output.result(str(key))


def cmd_decode(args: argparse.Namespace) -> None:
    """Handle the decode subcommand."""
    output = get_output()
    rows = []
    failed = False

    for raw in args.keys:
        try:
            key = decode_resource_key(raw)
        except MalformedKeyError as e:
            output.error(str(e), suggestion="Expected apiVersion:kind:namespace:name")
            failed = True
            continue
        output.verbose(f"Decoded {raw!r} -> {key!r}")
        rows.append(classification_row(key))

    if rows:
        output.table(None, CLASSIFICATION_COLUMNS, rows)

    if failed:
        sys.exit(1)


def cmd_keys(args: argparse.Namespace) -> None:
    """Handle the keys subcommand."""
    output = get_output()

    try:
        if args.file == "-":
            manifests = load_manifests(sys.stdin)
        else:
            with open(args.file, "r", encoding="utf-8") as f:
                manifests = load_manifests(f)
    except FileNotFoundError:
        output.error(f"Manifest file not found: {args.file}")
        sys.exit(1)
    except yaml.YAMLError as e:
        output.error(f"Invalid YAML in {args.file}: {e}")
        sys.exit(1)
    except UnicodeDecodeError as e:
        output.error(f"Manifest file is not valid UTF-8: {args.file}: {e}")
        sys.exit(1)
    except OSError as e:
        output.error(f"Cannot read manifest file {args.file}: {e}")
        sys.exit(1)

    logger.debug(f"Loaded {len(manifests)} manifests from {args.file}")
    output.verbose(f"Found {len(manifests)} manifests in {args.file}")
    if not manifests:
        output.info(f"No manifests found in {args.file}")
        return

    for manifest in manifests:
        key = make_resource_key(manifest)
        if key.is_zero():
            output.warning("Document has no apiVersion, kind, namespace or name")
        output.result(str(key))


def _add_verbosity_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only show errors and results",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show detailed output",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the kubekey CLI."""
    parser = argparse.ArgumentParser(
        prog="kubekey",
        description="Encode, decode and classify Kubernetes resource keys",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Encode subcommand
    encode_parser = subparsers.add_parser(
        "encode",
        help="Print the canonical key for a resource",
    )
    encode_parser.add_argument("--api-version", required=True, help="API version (e.g., apps/v1)")
    encode_parser.add_argument("--kind", required=True, help="Resource kind (e.g., Deployment)")
    encode_parser.add_argument(
        "--namespace",
        default="",
        help="Namespace (omit for cluster-scoped resources)",
    )
    encode_parser.add_argument("--name", required=True, help="Resource name")
    _add_verbosity_flags(encode_parser)
    encode_parser.set_defaults(func=cmd_encode)

    # Decode subcommand
    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode canonical keys and show their classification",
    )
    decode_parser.add_argument("keys", nargs="+", help="Canonical keys (apiVersion:kind:namespace:name)")
    _add_verbosity_flags(decode_parser)
    decode_parser.set_defaults(func=cmd_decode)

    # Keys subcommand
    keys_parser = subparsers.add_parser(
        "keys",
        help="Print the canonical key of every manifest in a YAML file",
    )
    keys_parser.add_argument("file", help="Path to a YAML file, or - for stdin")
    _add_verbosity_flags(keys_parser)
    keys_parser.set_defaults(func=cmd_keys)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the kubekey CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Set up verbosity
    if getattr(args, "quiet", False):
        verbosity = Verbosity.QUIET
    elif getattr(args, "verbose", False):
        verbosity = Verbosity.VERBOSE
    else:
        verbosity = Config.verbosity()

    if verbosity >= Verbosity.VERBOSE:
        logging.basicConfig(level=logging.DEBUG)

    set_output(OutputManager(verbosity=verbosity))

    # Call the appropriate command handler
    args.func(args)


if __name__ == "__main__":
    main()
