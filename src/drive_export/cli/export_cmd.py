"""Export command."""

from pathlib import Path
from typing import Optional

import typer

from ..auth.service import DriveServiceFactory
from ..common.exceptions import (
    AuthenticationError,
    ExportError,
    GDriveExportError,
    ScanError,
    WriteError,
)
from ..common.logging import get_logger
from ..config.settings import get_settings
from ..exporter.engine import ExportEngine
from ..exporter.runner import ExportRunner
from ..exporter.writer import LocalWriter
from ..reporting.markdown import IndexRenderer
from ..scanner.drive_scanner import DriveScanner
from .auth_cmd import build_oauth_manager
from .formatters import (
    print_error,
    print_info,
    print_markdown_source,
    print_panel,
    print_success,
)

logger = get_logger(__name__)


def export(
    slides: bool = typer.Option(
        False, "--slides", "-sld", help="Export slides to .pdf"
    ),
    programs: bool = typer.Option(
        False, "--programs", "-pgm", help="Export programs to .pdf"
    ),
    images: bool = typer.Option(
        True, "--img/--no-img", help="Export images to .svg (on by default)"
    ),
    index: bool = typer.Option(
        False, "--index", help="Render a markdown index of exported files"
    ),
    url_prefix: Optional[str] = typer.Option(
        None,
        "--url-prefix",
        help="Single URL prefix for all index links (default: one prefix per category)",
    ),
    index_output: Optional[Path] = typer.Option(
        None, "--index-output", help="Also write the markdown index to this file"
    ),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="List and plan exports without downloading"
    ),
) -> None:
    """Export Drive folders to the local site."""
    settings = get_settings()

    selected = [
        name
        for name, enabled in (("slides", slides), ("programs", programs), ("images", images))
        if enabled
    ]
    if not selected:
        print_info("No categories selected, nothing to export")
        return

    try:
        categories = [settings.category(name) for name in selected]

        oauth_manager = build_oauth_manager(settings)
        service_factory = DriveServiceFactory(oauth_manager)
        service_factory.create_service()

        runner = ExportRunner(
            DriveScanner(service_factory, settings.page_size),
            ExportEngine(service_factory),
            LocalWriter(),
        )

        if dry_run:
            print_info("Dry run mode - no files will be downloaded")

        report = runner.run(categories, dry_run=dry_run)

        summary = (
            f"Categories: {', '.join(report.categories)}\n"
            f"Files {'planned' if dry_run else 'written'}: {report.count}\n"
            f"Files excluded: {len(report.skipped)}"
        )
        print_panel("Export Summary", summary, style="green")

        if index:
            if url_prefix:
                sections = [(None, report.filenames, url_prefix)]
            else:
                sections = [
                    (
                        category.name,
                        [path.name for path in report.written_by_category.get(category.name, [])],
                        category.url_prefix,
                    )
                    for category in categories
                ]
            markdown = IndexRenderer().render_sections(sections)
            logger.info(f"Markdown index:\n{markdown}")
            print_markdown_source(markdown)
            if index_output:
                try:
                    index_output.parent.mkdir(parents=True, exist_ok=True)
                    index_output.write_text(markdown, encoding="utf-8")
                except OSError as e:
                    raise WriteError(f"Unable to write index {index_output}: {e}") from e
                print_success(f"Index written to: {index_output}")

        print_success("Export complete")

    except AuthenticationError as e:
        print_error(f"Authentication failed: {e}")
        raise typer.Exit(1)
    except ScanError as e:
        print_error(f"Listing failed: {e}")
        raise typer.Exit(1)
    except (ExportError, WriteError) as e:
        print_error(f"Export failed: {e}")
        raise typer.Exit(1)
    except GDriveExportError as e:
        print_error(str(e))
        raise typer.Exit(1)
