from __future__ import annotations

import hashlib
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .config import DEFAULT_CONFIG, TileCheckConfig
from .report import Diagnostic, error, warning

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024

W3001_DUPLICATE_NAME = "W3001_DUPLICATE_NAME"
W3002_DUPLICATE_SIZE = "W3002_DUPLICATE_SIZE"
W3003_DUPLICATE_HASH = "W3003_DUPLICATE_HASH"
E3004_REFERENCE_UNREADABLE = "E3004_REFERENCE_UNREADABLE"
E3005_REFERENCE_WALK_FAILED = "E3005_REFERENCE_WALK_FAILED"


def file_digest(path: Path, algorithm: str = "sha256") -> str:
    digest = hashlib.new(algorithm)
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


@dataclass
class CandidateFile:
    path: Path
    name: str
    size: int
    algorithm: str = "sha256"
    _digest: str | None = field(default=None, repr=False)

    @classmethod
    def from_path(cls, path: Path, algorithm: str = "sha256") -> "CandidateFile":
        return cls(path=path, name=path.name, size=path.stat().st_size, algorithm=algorithm)

    def load_digest(self) -> str:
        if self._digest is None:
            self._digest = file_digest(self.path, self.algorithm)
        return self._digest

    @property
    def digest(self) -> str:
        return self.load_digest()


class DuplicateDetector:
    def __init__(self, config: TileCheckConfig = DEFAULT_CONFIG) -> None:
        self.extension = config.extension
        self.algorithm = config.digest

    def iter_reference_files(self, reference_dir: Path, issues: list[Diagnostic]):
        """Yield reference tiles in sorted order; unlistable directories become diagnostics."""

        def _on_error(exc: OSError) -> None:
            where = exc.filename or reference_dir
            issues.append(
                error(
                    where,
                    E3005_REFERENCE_WALK_FAILED,
                    f"find_duplicates: unable to access directory: {exc.strerror or exc}",
                )
            )

        for root, dirs, files in os.walk(reference_dir, onerror=_on_error):
            dirs.sort()
            for name in sorted(files):
                if name.endswith(self.extension):
                    yield Path(root) / name

    def _compare(self, candidate: CandidateFile, reference: Path) -> list[Diagnostic]:
        # Contents can only match when sizes do.
        try:
            size = reference.stat().st_size
            digest = file_digest(reference, self.algorithm) if size == candidate.size else None
        except OSError as exc:
            return [
                error(
                    reference,
                    E3004_REFERENCE_UNREADABLE,
                    f"find_duplicates: unable to read reference file: {exc.strerror or exc}",
                )
            ]
        issues: list[Diagnostic] = []
        if reference.name == candidate.name:
            issues.append(
                warning(candidate.path, W3001_DUPLICATE_NAME, f"duplicate filename: {reference}")
            )
        if size == candidate.size:
            issues.append(
                warning(candidate.path, W3002_DUPLICATE_SIZE, f"duplicate size ({size}): {reference}")
            )
        if digest is not None and digest == candidate.digest:
            issues.append(
                warning(candidate.path, W3003_DUPLICATE_HASH, f"duplicate content hash: {reference}")
            )
        return issues

    def find_duplicates(self, candidate_path: Path | str, reference_dir: Path | str) -> list[Diagnostic]:
        """Compare one tile against every tile under ``reference_dir``.

        Name, size and digest matches are reported independently, so a
        reference file can produce up to three warnings. The candidate is
        not excluded when it lives inside the reference tree. Reference
        files that cannot be read are reported and skipped; an ``OSError``
        on the candidate itself propagates before any match is collected.
        """
        candidate = CandidateFile.from_path(Path(candidate_path), self.algorithm)
        candidate.load_digest()
        issues: list[Diagnostic] = []
        for reference in self.iter_reference_files(Path(reference_dir), issues):
            logger.debug("find_duplicates: comparing %s with %s", candidate.path, reference)
            issues.extend(self._compare(candidate, reference))
        return issues


def find_duplicates(
    candidate_path: Path | str,
    reference_dir: Path | str,
    config: TileCheckConfig = DEFAULT_CONFIG,
) -> list[Diagnostic]:
    return DuplicateDetector(config).find_duplicates(candidate_path, reference_dir)
