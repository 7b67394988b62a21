"""Clone CLI.

Clones a repository into a directory chosen from its host, owner, name and
main language, then prints that directory.
"""

import logging
import sys
from pathlib import Path

import click

from clone_library.config import CloneSettings
from clone_library.config import create_default_config
from clone_library.config import load_config
from clone_library.errors import CloneError
from clone_library.errors import LanguageLookupError
from clone_library.models import RepoDescriptor
from clone_library.paths import TemplateRegistry
from clone_library.repo import parse_repository
from clone_library.services import GitCloner
from clone_library.services import GitHubLanguageProvider
from clone_library.services import LanguageProvider

logger = logging.getLogger("clone_cli")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Send library logs to stderr at ``level``."""
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def detect_language(provider: LanguageProvider, repo: RepoDescriptor) -> str:
    """Ask ``provider`` for the main language, falling back to "" on failure."""
    try:
        return provider.main_language(repo)
    except LanguageLookupError as e:
        logger.warning(str(e))
        return ""


def _init_config(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    # -c is eager, so it is already in ctx.params wherever it appears
    config_path = ctx.params.get("config_path")
    try:
        path = create_default_config(config_path)
    except (CloneError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    click.echo(str(path))
    ctx.exit(0)


@click.command()
@click.argument("repository")
@click.option("-l", "--language", default="", help="Main language of the repo (skips the GitHub lookup)")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    is_eager=True,
    help="Config file (default: $CLONE_CONFIG or ~/.config/clone/config.yaml)",
)
@click.option("-n", "--dry-run", is_flag=True, help="Print URL and destination without cloning")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--init-config",
    is_flag=True,
    expose_value=False,
    callback=_init_config,
    help="Write the default config file and exit",
)
def cli(repository: str, language: str, config_path: Path | None, dry_run: bool, verbose: bool):
    """Clone REPOSITORY into a path derived from its host, owner and language.

    REPOSITORY may be git@host:owner/name, scheme://host/owner/name,
    host/owner/name or owner/name.
    """
    settings = load_config(config_path)
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        registry = TemplateRegistry.build(settings.path_templates)
        repo = parse_repository(repository, settings.default_host, settings.default_schemes)

        if not language:
            language = detect_language(_language_provider(settings), repo)

        path = registry.resolve(language, repo)
    except CloneError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if dry_run:
        click.echo(repo.url)
        click.echo(path)
        return

    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    result = GitCloner().clone(repo.url, path)
    if not result.success:
        click.echo(f"Git ERROR:\n{result.output.decode(errors='replace')}")
        sys.exit(1)

    click.echo(path)


def _language_provider(settings: CloneSettings) -> LanguageProvider:
    return GitHubLanguageProvider(api_url=settings.github_api_url, timeout=settings.language_lookup_timeout)


def main():
    """Entry point for clone CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nInterrupted")
        sys.exit(130)


if __name__ == "__main__":
    main()
