#!/usr/bin/env python3
"""
pathmorph - Main Entry

Supports:
- GUI mode (default startup)
- CLI mode (--cli or -c parameter)

Usage:
    pathmorph                                              # GUI mode (default)
    pathmorph ./photos                                     # GUI mode, scan ./photos
    pathmorph --cli ./photos --replace ext '^\\.jpeg$' .jpg  # CLI mode
    pathmorph -c ./photos --format name '^IMG' '%tF_%n' -d  # CLI mode, preview only
"""

import sys


def main():
    """Main entry point"""
    # Check if CLI should be started
    if "--cli" in sys.argv or "-c" in sys.argv:
        # Remove --cli parameter
        argv = [arg for arg in sys.argv[1:] if arg not in ("--cli", "-c")]

        # CLI mode
        from .cli import main as cli_main
        return cli_main(argv)

    # Default to starting GUI
    try:
        from .gui import main as gui_main
    except ImportError as e:
        print(f"Error: Unable to start GUI, please ensure PySide6 is installed")
        print(f"Detailed error: {e}")
        print("\nInstall command: pip install PySide6")
        print("\nTo use CLI mode, run:")
        print("    pathmorph --cli DIR [stages]")
        return 1
    return gui_main(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
