"""Command-line interface for wpr."""
import os
import sys
import logging

import click
from rich.markup import escape

from .core.config import create_default_config
from .core.exceptions import InstallError, WprError
from .core.models import Settings
from .core.runner import WprRunner
from .installer import ensure_installed, resolve_script, uninstall
from .ui.terminal import TerminalResponder
from .utils.console import ConsoleManager, THEMES

logger = logging.getLogger(__name__)


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def print_banner(console: ConsoleManager) -> None:
    """Print retro terminal banner."""
    console.print_header("W P R", "WRITE PROMPT WITH FILES")


def run_uninstall(console: ConsoleManager, settings: Settings) -> None:
    """Remove the PATH symlink."""
    try:
        if uninstall(settings.link_path):
            console.print_success(f"Successfully removed symlink at {settings.link_path}")
        else:
            console.print_info(f"No symlink found at {settings.link_path}")
    except InstallError as e:
        console.print_error(f"Error removing symlink: {e}")
        sys.exit(1)


def run_create_config(console: ConsoleManager, settings: Settings) -> None:
    """Write the default wpr.conf in the working directory."""
    if create_default_config(settings.config_path):
        console.print_success(f"Created default {settings.config_name} in the current directory.")
    else:
        console.print_info(f"{settings.config_name} already exists in this directory.")


@click.command()
@click.option('--uninstall', 'do_uninstall', is_flag=True, help='Remove the wpr symlink from PATH and exit')
@click.option('--config', 'do_config', is_flag=True, help='Create a default wpr.conf in the current directory and exit')
@click.option('--no-tokens', is_flag=True, help='Disable token counting')
@click.option('--no-install-check', is_flag=True, help='Do not offer to install wpr on PATH')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), default=None,
              help='Terminal color theme (default: $WPR_THEME or manhattan)')
@click.option('--debug', is_flag=True, help='Enable debug logging and tracebacks')
@click.version_option(package_name='wpr')
def main(do_uninstall: bool, do_config: bool, no_tokens: bool, no_install_check: bool,
         theme: str, debug: bool) -> None:
    """
    Select files from the current directory and bundle them with a prompt.

    Files are searched with fuzzy matching; pick "Done" on an empty search to
    finish. The result is written to wpr/<prompt-derived-name>.md.

    Examples:

        wpr

        wpr --config

        wpr --uninstall
    """
    setup_logging(debug)

    settings = Settings(enable_token_counting=not no_tokens)
    if theme:
        settings.theme = theme
    console = ConsoleManager(theme=settings.theme)

    try:
        if do_uninstall:
            run_uninstall(console, settings)
            return

        if do_config:
            run_create_config(console, settings)
            return

        responder = TerminalResponder(console)
        print_banner(console)

        script = None if no_install_check else resolve_script(sys.argv[0])
        if script is None:
            logger.debug(f"Skipping PATH check for launcher {sys.argv[0]!r}")
        else:
            try:
                if ensure_installed(responder, script, settings.link_path):
                    console.print_success(f'Symlink created at {settings.link_path}. You can now run "wpr" from anywhere.')
            except InstallError as e:
                console.print_warning(f"Failed to create symlink: {e}")

        runner = WprRunner(settings, responder, console)
        result = runner.run()

        console.print_separator()
        console.print("[success]DOCUMENT WRITTEN[/success]")
        console.print_separator()
        console.print(f"[info]OUTPUT:[/info] [path]{escape(os.path.relpath(result.output_path, settings.cwd))}[/path]")
        console.print(f"[info]FILES INCLUDED:[/info] [number]{result.total_files}[/number]")
        if settings.enable_token_counting:
            console.print(f"[info]TOTAL TOKENS:[/info] [token_count]{result.total_tokens:,}[/token_count]")

    except KeyboardInterrupt:
        console.print("\n[error]> PROCESS TERMINATED BY USER[/error]")
        sys.exit(1)

    except WprError as e:
        console.print_error(str(e))
        if debug:
            console.print_exception()
        sys.exit(1)

    except Exception as e:
        console.print(f"\n[error]> CRITICAL ERROR:[/error] {escape(str(e))}")
        if debug:
            console.print_exception()
        sys.exit(1)


if __name__ == '__main__':
    main()
