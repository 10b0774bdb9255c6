from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .checks import run_checks
from .config import DEFAULT_CONFIG, TileCheckConfig
from .duplicates import DuplicateDetector
from .errors import E1000_PARSE_ERROR, TileParseError
from .metadata import TileDocument, load_tile
from .report import Diagnostic, DiagnosticSink, Severity, error
from .spelling import Speller

logger = logging.getLogger(__name__)

E1003_DIRECTORY_UNAVAILABLE = "E1003_DIRECTORY_UNAVAILABLE"
E1004_FILE_UNREADABLE = "E1004_FILE_UNREADABLE"
E1005_WALK_FAILED = "E1005_WALK_FAILED"
E3006_CANDIDATE_UNREADABLE = "E3006_CANDIDATE_UNREADABLE"


class _WalkAborted(Exception):
    pass


@dataclass
class ScanSummary:
    files_checked: int = 0
    files_skipped: int = 0
    errors: int = 0
    warnings: int = 0
    aborted: bool = False


class TileWalker:
    def __init__(
        self,
        sink: DiagnosticSink,
        config: TileCheckConfig = DEFAULT_CONFIG,
        speller: Speller | None = None,
        verbose: bool = False,
    ) -> None:
        self.sink = sink
        self.config = config
        self.speller = speller
        self.verbose = verbose
        self.detector = DuplicateDetector(config)
        self.summary = ScanSummary()

    def _emit(self, diagnostics: list[Diagnostic]) -> None:
        for diagnostic in diagnostics:
            if diagnostic.severity is Severity.ERROR:
                self.summary.errors += 1
            else:
                self.summary.warnings += 1
            self.sink.emit(diagnostic)

    def _trace(self, path: Path, tile: TileDocument) -> None:
        if not self.verbose:
            return
        logger.debug(
            "width: %r, height: %r, viewBox: %r", tile.width, tile.height, tile.view_box
        )
        logger.debug("keywords: %s", ", ".join(tile.keywords))
        logger.debug("identifier: %s", tile.identifier)
        logger.debug("%s text runs: %d", path, len(tile.text_runs))

    def _check_roots(self, check_dir: Path, reference_dir: Path) -> bool:
        for root in (check_dir, reference_dir):
            if not root.is_dir() or not os.access(root, os.R_OK | os.X_OK):
                self._emit(
                    [
                        error(
                            root,
                            E1003_DIRECTORY_UNAVAILABLE,
                            "scan: directory does not exist or is not accessible",
                        )
                    ]
                )
                return False
        return True

    def check_file(self, path: Path, reference_dir: Path) -> None:
        """Extract, check and duplicate-scan one tile."""
        if self.verbose:
            logger.debug("check_file: %s", path)
        try:
            tile = load_tile(path)
        except OSError as exc:
            self.summary.files_skipped += 1
            self._emit(
                [error(path, E1004_FILE_UNREADABLE, f"check_file: unable to open: {exc.strerror or exc}")]
            )
            return
        except TileParseError as exc:
            self.summary.files_skipped += 1
            self._emit([error(path, E1000_PARSE_ERROR, f"check_file: {exc}")])
            return

        self.summary.files_checked += 1
        self._trace(path, tile)
        self._emit(run_checks(path, tile, self.speller, self.config))
        try:
            self._emit(self.detector.find_duplicates(path, reference_dir))
        except OSError as exc:
            self._emit(
                [
                    error(
                        path,
                        E3006_CANDIDATE_UNREADABLE,
                        f"find_duplicates: unable to read candidate: {exc.strerror or exc}",
                    )
                ]
            )

    def scan(self, check_dir: Path | str, reference_dir: Path | str) -> ScanSummary:
        """Check every tile under ``check_dir`` against ``reference_dir``.

        File-level failures are reported and skipped. A directory in the
        check tree that cannot be listed aborts the walk.
        """
        check_dir = Path(check_dir)
        reference_dir = Path(reference_dir)
        self.summary = ScanSummary()
        if not self._check_roots(check_dir, reference_dir):
            self.summary.aborted = True
            return self.summary

        def _on_error(exc: OSError) -> None:
            self._emit(
                [
                    error(
                        exc.filename or check_dir,
                        E1005_WALK_FAILED,
                        f"scan: unable to walk directory: {exc.strerror or exc}",
                    )
                ]
            )
            raise _WalkAborted() from exc

        try:
            for root, dirs, files in os.walk(check_dir, onerror=_on_error):
                dirs.sort()
                for name in sorted(files):
                    if not name.endswith(self.config.extension):
                        continue
                    self.check_file(Path(root) / name, reference_dir)
        except _WalkAborted:
            self.summary.aborted = True
        return self.summary
