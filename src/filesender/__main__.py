"""CLI entry point for filesender."""

import logging
import sys
from pathlib import Path

import click

from .adapters.clock import SystemClock
from .adapters.credential import load_credential
from .adapters.recognizer import YamlHeaderRecognizer
from .adapters.sender import create_sender
from .adapters.signer import HmacSigner
from .config import Settings, load_settings
from .domain.exceptions import CredentialError
from .domain.models import RawFile
from .domain.services import FileSender

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_file_sender(settings: Settings) -> FileSender:
    """Create a FileSender with configured adapters."""
    return FileSender(
        recognizer=YamlHeaderRecognizer(),
        signer=HmacSigner(),
        sender=create_sender(settings.delivery),
        clock=SystemClock(),
        accepted_formats=settings.validation.accepted_formats,
        freshness_months=settings.validation.freshness_months,
        max_workers=settings.pipeline.max_workers,
    )


def collect_files(paths: tuple[Path, ...], recursive: bool) -> list[Path]:
    """Collect files from paths (files kept in order, directories expanded sorted)."""
    collected: list[Path] = []
    for path in paths:
        if path.is_file():
            collected.append(path)
            continue
        pattern = "**/*" if recursive else "*"
        collected.extend(
            p for p in sorted(path.glob(pattern)) if p.is_file() and not p.name.startswith(".")
        )
    return collected


def read_raw_files(paths: list[Path]) -> list[RawFile]:
    return [RawFile(name=p.name, content=p.read_bytes()) for p in paths]


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("-c", "--config", type=click.Path(exists=True), help="Config file path")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config: str | None) -> None:
    """Filesender - sign and deliver document batches."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config) if config else None


@cli.command()
@click.argument(
    "paths", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path)
)
@click.option(
    "--credential",
    "credential_path",
    type=click.Path(path_type=Path),
    help="Credential file (overrides config)",
)
@click.option("--recursive/--no-recursive", default=False, help="Descend into directories")
@click.option("--dry-run", is_flag=True, help="Only recognize and validate")
@click.pass_context
def send(
    ctx: click.Context,
    paths: tuple[Path, ...],
    credential_path: Path | None,
    recursive: bool,
    dry_run: bool,
) -> None:
    """Sign and deliver documents."""
    settings = load_settings(ctx.obj["config_path"])
    files = read_raw_files(collect_files(paths, recursive))

    if not files:
        click.echo("No files to send")
        return

    service = create_file_sender(settings)

    if dry_run:
        failed = 0
        for file in files:
            reason = service.check_file(file)
            if reason is None:
                click.echo(f"✓ {file.name}")
            else:
                failed += 1
                click.echo(f"✗ {file.name}: {reason.value}", err=True)
        click.echo(f"\nWould send: {len(files) - failed}, would skip: {failed}")
        return

    credential_path = credential_path or settings.credential.path
    if credential_path is None:
        raise click.UsageError("No credential given (use --credential or config)")
    try:
        credential = load_credential(credential_path)
    except CredentialError as e:
        raise click.ClickException(str(e)) from e

    result = service.send_files(files, credential)

    skipped = {id(s.file): s.reason for s in result.skipped}
    for file in files:
        reason = skipped.get(id(file))
        if reason is None:
            click.echo(f"✓ {file.name}")
        else:
            click.echo(f"✗ {file.name}: {reason.value}", err=True)

    click.echo(f"\nSent: {result.sent_count}, skipped: {len(result.skipped)}")
    if not result.success:
        sys.exit(1)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def check(ctx: click.Context, file: Path) -> None:
    """Recognize and validate a single document."""
    settings = load_settings(ctx.obj["config_path"])
    service = create_file_sender(settings)
    raw = RawFile(name=file.name, content=file.read_bytes())

    reason, document = service.inspect_file(raw)
    if document is not None:
        click.echo(f"name: {document.name}")
        click.echo(f"format: {document.format}")
        click.echo(f"created: {document.created.isoformat()}")
        click.echo(f"content_length: {len(document.content)}")

    if reason is None:
        click.echo("status: ok")
    else:
        click.echo(f"status: {reason.value}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
