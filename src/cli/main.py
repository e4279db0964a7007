"""Main CLI entry point for the archive-tools command.

This module provides the Typer application that serves as the entry point
for the archive-tools command-line tool. Global options (credentials,
configuration file, verbosity) are taken by the app callback; each removal
variant is a subcommand.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from src.archive.log_paths import default_log_path
from src.archive.variants import ActiveFlagRemoval, DeliveryKeyRemoval, RemovalVariant
from src.cli.config import ConfigLoader
from src.cli.errors import ConfigError
from src.cli.models import ExitCode, GlobalOptions, RemoveOptions
from src.cli.output import OutputHandler
from src.cli.remove_command import RemoveArchivedCommand
from src.hub_client.api_wrapper import HubAPIWrapper
from src.hub_client.auth import Authenticator

__version__ = "0.1.0"

app = typer.Typer(
    name="archive-tools",
    help="""Bulk-modify archived content items in a content hub.

EXAMPLES:
  archive-tools remove-archived-delivery-key --repoId <repo> --name "/^header/"
  archive-tools remove-archived-delivery-key <item id>
  archive-tools remove-archived-active-flag --folderId <folder> -f""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "content-item"


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. The root logger is left unchanged.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"archive-tools_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"archive-tools version {__version__}")
        raise typer.Exit()


def _run_remove(ctx: typer.Context, variant: RemovalVariant, options: RemoveOptions) -> None:
    """Build the API client and run a removal variant.

    Args:
        ctx: Typer context carrying the GlobalOptions
        variant: Removal variant to run
        options: Parsed command options
    """
    settings: GlobalOptions = ctx.obj or GlobalOptions()

    _configure_logging(settings.verbosity, settings.logdir)
    output = OutputHandler(verbosity=settings.verbosity, no_color=settings.no_color)

    try:
        config = ConfigLoader.load(settings.config_path or ConfigLoader.DEFAULT_CONFIG_PATH)
    except ConfigError as e:
        logger.error(f"Failed to load configuration: {e}")
        output.error(f"Failed to load configuration: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    authenticator = Authenticator(
        overrides=settings.credential_overrides(),
        file_values=config.credential_values(),
    )
    api = HubAPIWrapper(authenticator, page_size=config.page_size)

    command = RemoveArchivedCommand(variant, api, output_handler=output)
    command.run(options)

    raise typer.Exit(ExitCode.SUCCESS)


def _build_options(
    variant: RemovalVariant,
    item_id: Optional[str],
    repo_id: Optional[List[str]],
    folder_id: Optional[List[str]],
    name: Optional[List[str]],
    content_type: Optional[List[str]],
    force: bool,
    silent: bool,
    ignore_error: bool,
    log_file: Optional[str],
) -> RemoveOptions:
    return RemoveOptions(
        id=item_id,
        repo_ids=tuple(repo_id or ()),
        folder_ids=tuple(folder_id or ()),
        names=tuple(name or ()),
        content_types=tuple(content_type or ()),
        force=force,
        silent=silent,
        ignore_error=ignore_error,
        log_file=log_file or default_log_path(RESOURCE_TYPE, variant.slug),
    )


@app.callback()
def main_callback(
    ctx: typer.Context,
    hub_id: Optional[str] = typer.Option(
        None,
        "--hubId",
        help="Hub ID (overrides DC_HUB_ID and the configuration file)",
    ),
    client_id: Optional[str] = typer.Option(
        None,
        "--clientId",
        help="OAuth client ID (overrides DC_CLIENT_ID and the configuration file)",
    ),
    client_secret: Optional[str] = typer.Option(
        None,
        "--clientSecret",
        help="OAuth client secret (overrides DC_CLIENT_SECRET and the configuration file)",
    ),
    config: str = typer.Option(
        ConfigLoader.DEFAULT_CONFIG_PATH,
        "--config",
        help="Path to a YAML configuration file",
        metavar="PATH",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for diagnostic log files (creates timestamped log file)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Bulk-modify archived content items in a content hub."""
    ctx.obj = GlobalOptions(
        hub_id=hub_id,
        client_id=client_id,
        client_secret=client_secret,
        config_path=config,
        verbosity=verbosity,
        no_color=no_color,
        logdir=logdir,
    )


ID_HELP = (
    "The ID of a content item in the archive to remove the {field} from. "
    "If id is not provided, this command will remove {fields} from ALL content items "
    "in the archive through all content repositories in the hub."
)
NAME_HELP = (
    "The name of a Content Item in the archive. A regex can be provided to select "
    "multiple items with similar or matching names (eg /.header/). Multiple --name "
    "options may be given to match multiple patterns."
)
CONTENT_TYPE_HELP = (
    "A pattern which will only check content items with a matching Content Type "
    "Schema ID. Multiple --contentType options may be given to match multiple patterns."
)


@app.command("remove-archived-delivery-key")
def remove_archived_delivery_key(
    ctx: typer.Context,
    item_id: Optional[str] = typer.Argument(
        None,
        metavar="[ID]",
        help=ID_HELP.format(field="delivery key", fields="delivery keys"),
    ),
    repo_id: Optional[List[str]] = typer.Option(
        None,
        "--repoId",
        help="The ID of a content repository to search items in to remove the delivery keys.",
    ),
    folder_id: Optional[List[str]] = typer.Option(
        None,
        "--folderId",
        help="The ID of a folder to search items in the archive.",
    ),
    name: Optional[List[str]] = typer.Option(None, "--name", help=NAME_HELP),
    content_type: Optional[List[str]] = typer.Option(None, "--contentType", help=CONTENT_TYPE_HELP),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="If present, there will be no confirmation prompt before removing the delivery keys.",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        "-s",
        help="If present, no log file will be produced.",
    ),
    ignore_error: bool = typer.Option(
        False,
        "--ignoreError",
        help="If present, requests that fail will not abort the process.",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--logFile",
        help="Path to a log file to write to; <DATE> is replaced by the run timestamp "
             "(default: ~/.amplience/logs/content-item-remove-archived-delivery-key-<DATE>.log)",
    ),
) -> None:
    """Remove Archived Content Item Delivery Key."""
    variant = DeliveryKeyRemoval()
    options = _build_options(
        variant, item_id, repo_id, folder_id, name, content_type,
        force, silent, ignore_error, log_file,
    )
    _run_remove(ctx, variant, options)


@app.command("remove-archived-active-flag")
def remove_archived_active_flag(
    ctx: typer.Context,
    item_id: Optional[str] = typer.Argument(
        None,
        metavar="[ID]",
        help=ID_HELP.format(field="active flag", fields="active flags"),
    ),
    repo_id: Optional[List[str]] = typer.Option(
        None,
        "--repoId",
        help="The ID of a content repository to search items in to remove the active flags.",
    ),
    folder_id: Optional[List[str]] = typer.Option(
        None,
        "--folderId",
        help="The ID of a folder to search items in the archive.",
    ),
    name: Optional[List[str]] = typer.Option(None, "--name", help=NAME_HELP),
    content_type: Optional[List[str]] = typer.Option(None, "--contentType", help=CONTENT_TYPE_HELP),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="If present, there will be no confirmation prompt before removing the active flags.",
    ),
    silent: bool = typer.Option(
        False,
        "--silent",
        "-s",
        help="If present, no log file will be produced.",
    ),
    ignore_error: bool = typer.Option(
        False,
        "--ignoreError",
        help="If present, requests that fail will not abort the process.",
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--logFile",
        help="Path to a log file to write to; <DATE> is replaced by the run timestamp "
             "(default: ~/.amplience/logs/content-item-remove-archived-active-flag-<DATE>.log)",
    ),
) -> None:
    """Remove Archived Content Item Active Flag."""
    variant = ActiveFlagRemoval()
    options = _build_options(
        variant, item_id, repo_id, folder_id, name, content_type,
        force, silent, ignore_error, log_file,
    )
    _run_remove(ctx, variant, options)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
