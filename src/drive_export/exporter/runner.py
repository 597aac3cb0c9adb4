"""Sequential export driver."""

from collections.abc import Iterable
from pathlib import Path

from ..common.exceptions import ExportError
from ..common.logging import get_logger
from ..scanner.drive_scanner import DriveScanner
from .engine import ExportEngine
from .models import ExportCategory, ExportReport
from .writer import LocalWriter

logger = get_logger(__name__)


def resolve_output_path(target_dir: Path, output_name: str) -> Path:
    """Join an output name to its target directory.

    Raises:
        ExportError: If the name would place the file outside target_dir
    """
    path = target_dir / output_name
    if output_name in ("", ".", "..") or path.parent != target_dir:
        raise ExportError(f"Refusing to write {output_name!r} outside {target_dir}")
    return path


class ExportRunner:
    """Runs categories one after another; the first error aborts the run."""

    def __init__(
        self,
        scanner: DriveScanner,
        engine: ExportEngine,
        writer: LocalWriter,
    ) -> None:
        self.scanner = scanner
        self.engine = engine
        self.writer = writer

    def run(self, categories: Iterable[ExportCategory], dry_run: bool = False) -> ExportReport:
        """Export every category in order.

        Args:
            categories: Categories to export
            dry_run: If True, list and plan without fetching or writing

        Returns:
            Combined report for all categories

        Raises:
            GDriveExportError: On the first failure in any category
        """
        report = ExportReport()
        for category in categories:
            report.merge(self.run_category(category, dry_run=dry_run))
        return report

    def run_category(self, category: ExportCategory, dry_run: bool = False) -> ExportReport:
        """Export a single folder to its target directory.

        Args:
            category: Category to export
            dry_run: If True, list and plan without fetching or writing

        Returns:
            Report for this category
        """
        logger.info(
            f"Exporting {category.name} ({category.mode.value}) "
            f"from folder {category.folder_id} to {category.target_dir}"
        )
        report = ExportReport(categories=[category.name])

        for record in self.scanner.list_files(category.folder_id):
            folder_name = (
                self.scanner.get_folder_name(record.parent_id) if record.parent_id else ""
            )
            logger.info(
                f"FileID={record.file_id}, Filename={record.name}, "
                f"FolderName={folder_name} MimeType={record.mime_type}"
            )

            if dry_run:
                plan = self.engine.plan(record, category.mode)
                if plan.skipped:
                    logger.info(f"Excluding filename={record.name}, MimeType={record.mime_type}")
                    report.skipped.append(record)
                    continue
                path = resolve_output_path(category.target_dir, plan.output_name)
                logger.info(f"[DRY RUN] Would {plan.action.value} {record.name} to {path}")
                report.add_written(category.name, path)
                continue

            result = self.engine.fetch(record, category.mode)
            if result is None:
                report.skipped.append(record)
                continue

            path = resolve_output_path(category.target_dir, result.output_name)
            self.writer.write(path, result.data)
            report.add_written(category.name, path)

        logger.info(
            f"Finished {category.name}: {report.count} written, {len(report.skipped)} excluded"
        )
        return report
