"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from recent_work.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from recent_work import __version__

        print(f"recent-work {__version__}")
        return 0

    app = _create_app()
    try:
        # Usage errors are reported by typer itself and exit with status 2
        app(argv)
        return 0
    except typer.Exit as e:
        return e.exit_code
