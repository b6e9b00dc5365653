from __future__ import annotations

import logging
from datetime import date

from sanger_rename.domain.models import CommitReport, RenameOutcome
from sanger_rename.domain.registry import FilenameRegistry
from sanger_rename.domain.rename_logic import target_path
from sanger_rename.ports.filesystem_port import FileSystemPort

logger = logging.getLogger(__name__)


class RenameService:
    def __init__(self, filesystem: FileSystemPort) -> None:
        self._filesystem = filesystem

    def apply_rename(self, registry: FilenameRegistry, today: date) -> CommitReport:
        """
        Move every entry to its standardized name, one file at a time.

        A failure is recorded against its entry and the remaining files are
        still processed. Already moved files are not rolled back.
        """
        report = CommitReport()
        for entry in registry:
            source = entry.full_path
            try:
                target = target_path(entry, today)
                if target != source:
                    self._filesystem.rename_file(source, target)
            except (OSError, ValueError) as exc:
                logger.warning("Rename failed for %s: %s", source, exc)
                report.outcomes.append(
                    RenameOutcome(full_path=source, target_path="", ok=False, error=str(exc))
                )
                continue
            entry.renamed = True
            logger.info("Renamed %s -> %s", source, target)
            report.outcomes.append(RenameOutcome(full_path=source, target_path=target, ok=True))
        logger.info(
            "Rename finished: %d succeeded, %d failed", report.succeeded, report.failed
        )
        return report
