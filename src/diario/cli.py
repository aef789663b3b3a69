"""
CLI for Diario.

Minimal CLI using stdlib; the journal itself is the interactive menu.
Subcommands are imported lazily to keep startup light.

Usage:
    diario                  # Open the journal menu
    diario health           # Check config and notes file
    diario --help           # Show help
"""

import logging
import sys

logger = logging.getLogger("diario")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def print_help() -> None:
    """Print help message."""
    print("""diario - a tiny terminal journal

Usage:
    diario                        Open the journal menu

Commands:
    diario health                 Check config and notes file

Options:
    diario --help, -h             Show this help
    diario --version, -v          Show version

Menu:
    1  Add a note (one line, stored exactly as typed)
    2  Show the whole journal
    3  Quit

The notes file must already exist. Its location is notes.txt in the
current directory unless DIARIO_NOTES or [diario] notes_path in
~/.config/diario/config.toml says otherwise.""")


def print_version() -> None:
    """Print version."""
    from diario import __version__
    print(f"diario {__version__}")


def configure_logging(level: str, filename: str = "") -> None:
    """Set up root logging. An empty filename logs to stderr."""
    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, level),
        filename=filename or None,
    )


def cmd_journal() -> int:
    """Run the interactive journal until the user exits."""
    from diario.config import get_notes_path, load_config
    from diario.errors import DiarioError
    from diario.store import NoteStore
    from diario.terminal import InteractionLoop, Terminal

    try:
        config = load_config()
        configure_logging(config.logging.level_name(), config.logging.file)

        notes_path = get_notes_path(config)
        store = NoteStore.open(notes_path, atomic=config.diario.atomic_writes)
        loop = InteractionLoop(store, Terminal(), clear_screen=config.diario.clear_screen)
        loop.run()
        return 0
    except DiarioError as e:
        logger.debug(f"Fatal: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


def cmd_health() -> int:
    """Show health report."""
    from diario.health import format_health_report, run_health_check

    checks = run_health_check()
    print(format_health_report(checks))

    failed = any(status == "✗" for status, _ in checks.values())
    return 1 if failed else 0


def main() -> int:
    """Main entry point."""
    args = sys.argv[1:]

    if not args:
        return cmd_journal()

    first_arg = args[0]

    if first_arg in ("--help", "-h", "help"):
        print_help()
        return 0

    if first_arg in ("--version", "-v", "version"):
        print_version()
        return 0

    if first_arg == "health":
        return cmd_health()

    print(f"Unknown command: {first_arg}", file=sys.stderr)
    print("Run 'diario --help' for usage.", file=sys.stderr)
    return 2


if __name__ == "__main__":
    sys.exit(main())
