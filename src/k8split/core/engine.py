#!/usr/bin/env python3
"""
K8SPLIT ENGINE - The Orchestrator
---------------------------------
SplitEngine runs one split of a composite manifest: read, detect the
line ending, split, parse, name, deduplicate and write. The run is a
single linear pass; the first fatal error aborts the remaining chunks.

Author: K8Split Team
Date: 2026-10-18
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Set

from k8split.core.errors import (
    InputReadError,
    OutputDirectoryError,
    SchemaError,
    UsageError,
)
from k8split.core.models import ChunkOutcome, ChunkStatus, SplitReport
from k8split.splitting.extractor import extract_identity, parse_document
from k8split.splitting.splitter import detect_line_ending, split_documents
from k8split.splitting.writer import ManifestWriter

logger = logging.getLogger("k8split.engine")


@dataclass
class SplitOptions:
    """Per-run settings, filled from CLI flags."""
    output_dir: Path = Path(".")
    dry_run: bool = False
    detect_line_endings: bool = False
    platform: Optional[str] = None  # Overrides sys.platform for line ending detection


class SplitEngine:
    """
    Splits one composite manifest into one file per resource.
    """

    def __init__(self, options: Optional[SplitOptions] = None):
        self.options = options or SplitOptions()
        self.output_dir = Path(self.options.output_dir)
        self.writer = ManifestWriter(self.output_dir)

    def _check_paths(self, source: Path):
        if not source.exists():
            raise UsageError(f"unable to open file {source} - no such file or directory")
        if not self.output_dir.is_dir():
            raise OutputDirectoryError(f"output directory {self.output_dir} does not exist")

    def _read_source(self, source: Path) -> bytes:
        try:
            return source.read_bytes()
        except OSError as e:
            raise InputReadError(f"unable to read {source}: {e}") from e

    def split(self, source_path) -> SplitReport:
        """
        Performs the full split of source_path into the output directory.

        Raises a K8SplitError subclass on the first fatal condition.
        """
        source = Path(source_path)
        self._check_paths(source)
        raw = self._read_source(source)

        logger.info(f"splitting {source}...")

        line_ending = detect_line_ending(
            raw,
            platform=self.options.platform,
            from_content=self.options.detect_line_endings,
        )
        chunks = split_documents(raw, line_ending)
        logger.info(f"split file into {len(chunks)} chunks")

        report = SplitReport(source=source, output_dir=self.output_dir, total_chunks=len(chunks))
        created: Set[str] = set()

        for index, chunk in enumerate(chunks):
            report.outcomes.append(self._process_chunk(index, chunk, created))

        return report

    def _process_chunk(self, index: int, chunk: bytes, created: Set[str]) -> ChunkOutcome:
        document = parse_document(chunk, index)
        if document is None:
            return ChunkOutcome(index=index, status=ChunkStatus.BLANK)

        extraction = extract_identity(document)
        if not extraction.ok:
            raise SchemaError(index, extraction.missing)
        identity = extraction.identity

        filename = identity.filename
        if filename in created:
            logger.warning(
                f"skipping duplicate resource: {identity.name} "
                f"(a {identity.kind} in namespace {identity.namespace})"
            )
            return ChunkOutcome(index=index, status=ChunkStatus.DUPLICATE, identity=identity)
        created.add(filename)

        if self.options.dry_run:
            logger.info(f"Would write file: {filename}")
            return ChunkOutcome(index=index, status=ChunkStatus.PREVIEW, identity=identity,
                                path=self.output_dir / filename)

        logger.info(f"Writing file: {filename}")
        path = self.writer.write(filename, chunk)
        return ChunkOutcome(index=index, status=ChunkStatus.WRITTEN, identity=identity, path=path)
