"""Chain markdown files: frontmatter spec plus per-step notes."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

import frontmatter

from step_chain.models.chain_spec import ChainSpec


logger = logging.getLogger(__name__)

STEP_HEADER_RE = re.compile(r"^#{1,6}\s+step\s*:\s*([A-Za-z0-9_-]+)\s*$", re.MULTILINE | re.IGNORECASE)


@dataclass(frozen=True)
class LoadedChainFile:
    spec: ChainSpec
    source: str
    step_notes: dict[str, str] = field(default_factory=dict)  # step id -> markdown chunk

    @classmethod
    def from_path(cls, path: Path) -> "LoadedChainFile":
        return cls.from_text(path.read_text(encoding="utf-8"), source=str(path))

    @classmethod
    def from_text(cls, text: str, *, source: str = "<inline>") -> "LoadedChainFile":
        post = frontmatter.loads(text)
        spec = ChainSpec.model_validate(post.metadata)
        step_ids = {step.id for step in spec.steps}
        notes: dict[str, str] = {}
        for step_id, note in split_step_notes(post.content).items():
            if step_id not in step_ids:
                logger.warning("Ignored notes for unknown step %r in %s", step_id, source)
                continue
            notes[step_id] = note
        return cls(spec=spec, source=source, step_notes=notes)

    def note_for(self, step_id: str) -> str:
        return self.step_notes.get(step_id, "")


def split_step_notes(markdown_body: str) -> dict[str, str]:
    """
    Extracts blocks that begin with headings "## step:<id>".
    Returns mapping: "<id>" -> content for that step (excluding heading line).
    A block ends at the next step heading or the end of the body;
    a repeated heading keeps its first block.
    """
    matches = list(STEP_HEADER_RE.finditer(markdown_body))
    out: dict[str, str] = {}

    for i, m in enumerate(matches):
        end = matches[i + 1].start() if (i + 1) < len(matches) else len(markdown_body)
        out.setdefault(m.group(1), markdown_body[m.end() : end].strip())

    return out
