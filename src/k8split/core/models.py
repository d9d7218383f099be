#!/usr/bin/env python3
"""
K8SPLIT CORE MODELS
-------------------
Defines the data structures shared by the splitter, the extractor
and the engine. These models describe a single split run.

Author: K8Split Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Dict


class LineEnding(Enum):
    """Line break convention used to build the document separator."""
    LF = "\n"
    CRLF = "\r\n"

    @property
    def separator(self) -> bytes:
        """The byte sequence that delimits two documents."""
        return f"{self.value}---{self.value}".encode("ascii")


@dataclass(frozen=True)
class ResourceIdentity:
    """
    The (kind, name, namespace) triple of a Kubernetes resource.
    It names the output file and is the key used for deduplication.
    """
    kind: str
    name: str
    namespace: str

    @property
    def filename(self) -> str:
        return f"{self.kind}__{self.name}__{self.namespace}.yaml"


class ChunkStatus(Enum):
    WRITTEN = "WRITTEN"
    PREVIEW = "PREVIEW"        # Would have been written (dry run)
    DUPLICATE = "DUPLICATE"
    BLANK = "BLANK"


@dataclass
class ChunkOutcome:
    """What happened to one document chunk."""
    index: int
    status: ChunkStatus
    identity: Optional[ResourceIdentity] = None
    path: Optional[Path] = None


@dataclass
class SplitReport:
    """
    The record of a completed split run, in document order.
    """
    source: Path
    output_dir: Path
    total_chunks: int = 0
    outcomes: List[ChunkOutcome] = field(default_factory=list)

    def by_status(self, status: ChunkStatus) -> List[ChunkOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def written_files(self) -> List[Path]:
        return [o.path for o in self.outcomes if o.status is ChunkStatus.WRITTEN]

    def summary(self) -> Dict[str, int]:
        """Counts per outcome, used by the CLI summary panel."""
        return {
            "total_chunks": self.total_chunks,
            "written": len(self.by_status(ChunkStatus.WRITTEN)),
            "previewed": len(self.by_status(ChunkStatus.PREVIEW)),
            "duplicates": len(self.by_status(ChunkStatus.DUPLICATE)),
            "blank": len(self.by_status(ChunkStatus.BLANK)),
        }
