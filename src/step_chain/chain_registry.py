"""Chain file discovery across search roots."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

from step_chain.models.loaded_chain_file import LoadedChainFile


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChainEntry:
    """One chain id as seen across all roots. Earlier roots win."""

    chain_id: str
    path: Path
    shadowed: tuple[Path, ...] = ()


@dataclass(frozen=True)
class ChainListing:
    entry: ChainEntry
    loaded: LoadedChainFile | None = None
    error: str | None = None


class ChainRegistry:
    def __init__(self, chain_roots: list[Path]):
        self.chain_roots = chain_roots
        self._cache: dict[str, LoadedChainFile] = {}
        self._entries: dict[str, ChainEntry] | None = None

    def entries(self) -> dict[str, ChainEntry]:
        if self._entries is None:
            found: dict[str, list[Path]] = {}
            for root in self.chain_roots:
                if root.is_dir():
                    for path in sorted(root.rglob("*.md")):
                        found.setdefault(path.stem, []).append(path)
            self._entries = {
                chain_id: ChainEntry(chain_id, paths[0], tuple(paths[1:]))
                for chain_id, paths in sorted(found.items())
            }
            for entry in self._entries.values():
                if entry.shadowed:
                    logger.info("Chain %s from %s shadows %s", entry.chain_id, entry.path, list(map(str, entry.shadowed)))
        return self._entries

    def list_chains(self) -> list[str]:
        return list(self.entries())

    def get(self, chain_id: str) -> LoadedChainFile:
        if chain_id not in self._cache:
            entry = self.entries().get(chain_id)
            if entry is None:
                raise FileNotFoundError(f"Chain not found: {chain_id} (searched: {self.chain_roots})")
            self._cache[chain_id] = LoadedChainFile.from_path(entry.path)
        return self._cache[chain_id]

    def survey(self) -> list[ChainListing]:
        """
        Loads every chain and reports per-chain validation errors instead of
        stopping at the first malformed file.
        """
        listings: list[ChainListing] = []
        for chain_id, entry in self.entries().items():
            try:
                listings.append(ChainListing(entry, loaded=self.get(chain_id)))
            except (OSError, ValueError, yaml.YAMLError) as exc:
                logger.warning("Invalid chain file %s: %s", entry.path, exc)
                listings.append(ChainListing(entry, error=str(exc)))
        return listings
