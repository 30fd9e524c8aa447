"""Main entry point for Autolock."""

import argparse
import sys
from pathlib import Path

from autolock.lock.password import hash_password
from autolock.runtime.controller import RuntimeController


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(
        description="Autolock - lock the session after a period of inactivity"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config/default.yaml"),
        help="Path to configuration file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="store_true",
        help="Show version and exit",
    )
    parser.add_argument(
        "--hash-password",
        metavar="PASSWORD",
        help="Print a password hash for the config file and exit",
    )

    args = parser.parse_args(argv)

    if args.version:
        from autolock import __version__

        print(f"Autolock v{__version__}")
        return 0

    if args.hash_password is not None:
        try:
            print(hash_password(args.hash_password))
        except ValueError as e:
            print(f"Error: {e}")
            return 1
        return 0

    try:
        controller = RuntimeController(config_path=args.config)
        controller.start()
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    except Exception as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
