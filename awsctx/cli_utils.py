# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#                            ᚱᚢᚾᛁᚱ • THE RUNES
#                    Sacred Symbols of Power and Knowledge
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#
#   Shared console, exit codes and logging setup for every awsctx command.
#
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from awsctx import errors

# ᛏᛁᚹᚨᛉ • Tiwaz - Exit Codes
class ExitCode:
    """
    Exit codes returned by the awsctx CLI.
    
    Usage:
        sys.exit(ExitCode.NOT_FOUND)
    
    Shell Example:
        awsctx create staging --profile ci
        if [ $? -eq 2 ]; then echo "profile missing"; fi
    """
    SUCCESS = 0              # Context resolved
    ERROR = 1                # Unexpected failure
    NOT_FOUND = 2            # Explicit profile is not configured
    ALREADY_EXISTS = 3       # Refused to overwrite stored credentials
    VALIDATION = 4           # Empty name/region or malformed keys
    IO_ERROR = 10            # Shared credentials/config file could not be read or written
    CANCELED = 130           # User pressed Ctrl-C (same as SIGINT convention)


# Checked in order; ConfigFileNotFoundError maps through ConfigFileError
ERROR_EXIT_CODES = (
    (errors.NotFoundError, ExitCode.NOT_FOUND),
    (errors.AlreadyExistsError, ExitCode.ALREADY_EXISTS),
    (errors.ValidationError, ExitCode.VALIDATION),
    (errors.CanceledError, ExitCode.CANCELED),
    (errors.ConfigFileError, ExitCode.IO_ERROR),
)


def exit_code_for(error: Exception) -> int:
    """Exit code the CLI ends with after reporting error."""
    for error_class, code in ERROR_EXIT_CODES:
        if isinstance(error, error_class):
            return code
    return ExitCode.ERROR


# Output formats for resolved contexts
OUTPUT_FORMATS = ('table', 'json')

LOG_FORMAT = '%(name)s: %(message)s'

# ═══════════════════════════════════════════════════════════════════════════════
# Logging
# ═══════════════════════════════════════════════════════════════════════════════
logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# Console Configuration
# ═══════════════════════════════════════════════════════════════════════════════
console = Console()
err_console = Console(stderr=True)


def set_console_theme(*, no_color: bool = False) -> None:
    """
    Configure global console instances with theme settings.
    
    Args:
        no_color: If True, disable all colored/styled output
    """
    global console, err_console
    console = Console(no_color=no_color)
    err_console = Console(stderr=True, no_color=no_color)


def configure_logging(*, verbose: bool = False) -> None:
    """
    Route log records to stderr through rich.
    
    Args:
        verbose: If True, log at DEBUG level, otherwise only warnings
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(console=err_console, show_path=False, show_time=verbose)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    logger.debug("Logging configured: level=%s", logging.getLevelName(level))


def print_error(message: str) -> None:
    """Print an error line the way every command reports failures."""
    err_console.print(f"[red]✗ Error:[/red] {escape(message)}")


AWSCTX_BANNER_SMALL = "[bold cyan]⚔️  AWSCTX[/bold cyan] [dim]• Profiles and regions for deployment contexts[/dim]"


def print_version_info() -> None:
    """Print detailed version and system information."""
    import platform
    import sys
    import botocore
    from awsctx import __version__
    from awsctx.aws_utils import AwsFiles

    files = AwsFiles.from_environment()

    console.print(AWSCTX_BANNER_SMALL)
    console.print()
    console.print(f"[bold cyan]Version:[/bold cyan]     {__version__}")
    console.print(f"[bold cyan]Python:[/bold cyan]      {sys.version.split()[0]}")
    console.print(f"[bold cyan]Platform:[/bold cyan]    {platform.system()} {platform.release()}")
    console.print(f"[bold cyan]botocore:[/bold cyan]    {botocore.__version__}")
    console.print(f"[bold cyan]Credentials:[/bold cyan] {files.credentials}")
    console.print(f"[bold cyan]Config:[/bold cyan]      {files.config}")
    console.print()
