"""Create the main Typer CLI app."""

import typer

from recent_work.api.tracker.cmd_clear import cmd_clear
from recent_work.api.tracker.cmd_list import cmd_list
from recent_work.api.tracker.cmd_prune import cmd_prune
from recent_work.api.tracker.cmd_run import cmd_run
from recent_work.api.tracker.cmd_status import cmd_status
from recent_work.cli._handle_stage_result import DISPLAY_FORMATS, _handle_stage_result
from recent_work.cli.config import config


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Keep a folder of symlinks to recently modified files",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(config(), name="config")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    @app.command(name="run")
    def run_cmd() -> None:
        """Run the tracker in the foreground until interrupted (Ctrl+C)."""
        cmd_run()

    @app.command(name="status")
    def status_cmd(ctx: typer.Context) -> None:
        """Show tracker status."""
        _handle_stage_result(cmd_status, ctx)()

    @app.command(name="list")
    def list_cmd(ctx: typer.Context) -> None:
        """List tracked files, newest first."""
        _handle_stage_result(cmd_list, ctx)()

    @app.command(name="clear")
    def clear_cmd(
        ctx: typer.Context,
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    ) -> None:
        """Remove every symlink and reset the state."""
        if not yes:
            typer.confirm("Remove all symlinks from the output directory?", abort=True, err=True)
        _handle_stage_result(cmd_clear, ctx)()

    @app.command(name="prune")
    def prune_cmd(ctx: typer.Context) -> None:
        """Run one prune cycle now."""
        _handle_stage_result(cmd_prune, ctx)()

    return app
