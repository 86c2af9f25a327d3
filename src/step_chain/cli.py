"""CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from step_chain.chain_registry import ChainRegistry
from step_chain.runner import ChainRunner


def dump_result(value: Any) -> str:
    text = yaml.safe_dump(value, allow_unicode=False, default_flow_style=False)
    # Scalars come back with an explicit document end marker.
    if text.endswith("\n...\n"):
        text = text[: -len("...\n")]
    return text.rstrip()


def list_chains(registry: ChainRegistry) -> None:
    for listing in registry.survey():
        entry = listing.entry
        if listing.loaded is not None:
            line = f"{entry.chain_id}\t{listing.loaded.spec.description}".rstrip()
        else:
            line = f"{entry.chain_id}\tINVALID: {listing.error}"
        print(line)
        for path in entry.shadowed:
            print(f"  (shadows {path})")


def describe_chain(registry: ChainRegistry, chain_id: str) -> None:
    loaded = registry.get(chain_id)
    print(f"{loaded.spec.name} ({loaded.source})")
    if loaded.spec.description:
        print(loaded.spec.description)
    for index, step in enumerate(loaded.spec.steps, start=1):
        print(f"{index}. {step.id} [{step.kind.value}] {step.uses}")
        for line in loaded.note_for(step.id).splitlines():
            print(f"   {line}".rstrip())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="step-chain")
    parser.add_argument("--chains-dir", type=str, default="chains")
    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("--chain", type=str, help="Chain ID to run")
    action_group.add_argument("--describe", type=str, metavar="CHAIN", help="Show a chain's steps and notes")
    action_group.add_argument("--list", action="store_true", help="List available chains")
    parser.add_argument("--initial", type=str, default=None, help="Initial context (YAML); only with --chain")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if args.initial is not None and args.chain is None:
        parser.error("--initial can only be used with --chain")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    package_root = Path(__file__).resolve().parent
    runner = ChainRunner([Path(args.chains_dir), package_root / "chains"])

    try:
        if args.list:
            list_chains(runner.registry)
            return 0
        if args.describe is not None:
            describe_chain(runner.registry, args.describe)
            return 0
        if args.initial is None:
            out = runner.run(args.chain)
        else:
            out = runner.run(args.chain, yaml.safe_load(args.initial))
    except Exception as exc:
        logging.getLogger(__name__).debug("Chain failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(dump_result(out))
    return 0


if __name__ == "__main__":
    sys.exit(main())
