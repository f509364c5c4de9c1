"""
cli_entry.py - CLI Entry Point

Stages are given as options and run in the order they appear on the command line.
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import List, Optional

from ..core import (
    Change,
    EngineConfig,
    RenameError,
    RenameOptions,
    StageKind,
    StageSpec,
    build_stage,
    execute_plan,
    find_collisions,
    format_change,
    list_files,
    parse_key_pair,
    save_rename_log,
    transform,
)
from ..core.config import DEFAULT_FALLBACK_EXTENSION, DEFAULT_HASH_ALGORITHM

PREVIEW_LIMIT = 20


class StageAction(argparse.Action):
    """Append a StageSpec to a shared list so stage order is kept"""

    def __call__(self, parser, namespace, values, option_string=None):
        kind = StageKind(self.const)
        if kind is StageKind.SET:
            key, value = values
            pattern = ""
        else:
            key, pattern, value = values

        try:
            get, put = parse_key_pair(key)
        except RenameError as e:
            parser.error(f"{option_string}: {e}")

        stages = list(getattr(namespace, self.dest, None) or [])
        stages.append(StageSpec(kind=kind, get=get, put=put, pattern=pattern, value=value))
        setattr(namespace, self.dest, stages)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="pathmorph",
        description="Plan and apply bulk renames without overwriting files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
KEY is one of path, parent, file, name, ext, optionally prefixed with old- or
new- (default new-). Use GET:PUT to read one part and write another.

Format directives:
  %%  literal %          %e  extension       %n  name
  %g  guessed extension  %x  checksum        %t<c> mtime conversion (%tF, %tH ...)
  %0-%9  capture groups of the match

Examples:
  # Preview canonical jpg extensions
  pathmorph ~/Downloads --replace ext '^\\.(jpeg|jfif)$' .jpg --dry-run

  # Add missing extensions, then name junk images after their timestamp
  pathmorph ~/Downloads --format file '^[^.]+$' '%n%g' --format name '^image' '%tF_%tH-%tM-%tS'

  # Move pdfs into another directory
  pathmorph ~/Downloads --substitute ext:parent '^\\.pdf$' ~/Documents
"""
    )

    parser.add_argument("paths", nargs="+", help="Directories (their files) or individual files")

    stage_group = parser.add_argument_group("stages (applied in the order given)")
    stage_group.add_argument("--set", dest="stages", action=StageAction, const="set",
                             nargs=2, metavar=("KEY", "VALUE"), help="Set KEY to VALUE")
    stage_group.add_argument("--substitute", "-s", dest="stages", action=StageAction, const="substitute",
                             nargs=3, metavar=("KEY", "PATTERN", "VALUE"),
                             help="Set KEY to VALUE if PATTERN matches it")
    stage_group.add_argument("--replace", "-r", dest="stages", action=StageAction, const="replace",
                             nargs=3, metavar=("KEY", "PATTERN", "VALUE"),
                             help="Replace every PATTERN match in KEY (\\1 back-references)")
    stage_group.add_argument("--format", "-f", dest="stages", action=StageAction, const="format",
                             nargs=3, metavar=("KEY", "PATTERN", "TEMPLATE"),
                             help="Set KEY to TEMPLATE rendered with the match if PATTERN matches")

    parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")
    parser.add_argument("--quiet", "-q", action="store_true", help="Do not print changes")
    parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")
    parser.add_argument("--hash", default=DEFAULT_HASH_ALGORITHM,
                        help=f"Checksum algorithm for %%x (default {DEFAULT_HASH_ALGORITHM})")
    parser.add_argument("--fallback-ext", default=DEFAULT_FALLBACK_EXTENSION,
                        help=f"Extension for %%g when the file type is unknown (default {DEFAULT_FALLBACK_EXTENSION})")
    parser.add_argument("--log-dir", type=str, help="Save a JSON log of the renames in this directory")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    parser.set_defaults(stages=[])
    return parser


def collect_inputs(paths: List[str]) -> List[Path]:
    """Expand directories into their files, keep files as given"""
    files: List[Path] = []
    for p in paths:
        path = Path(p).expanduser()
        if path.is_dir():
            files.extend(list_files(path))
        elif path.is_file():
            files.append(path)
        else:
            raise ValueError(f"No such file or directory: {path}")
    return files


def print_preview(changes: List[Change]) -> None:
    """Show the plan, noting names that will get a discriminator"""
    collisions = find_collisions(changes)

    print(f"Will perform {len(changes)} rename operations:")
    print("-" * 80)
    for c in changes[:PREVIEW_LIMIT]:
        note = " (name taken, will be numbered)" if c.new in collisions else ""
        print(f"  {format_change(c)}{note}")
    if len(changes) > PREVIEW_LIMIT:
        print(f"  ... and {len(changes) - PREVIEW_LIMIT} more operations")
    print("-" * 80)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.stages:
        parser.error("at least one stage (--set, --substitute, --replace, --format) is required")

    config = EngineConfig(hash_algorithm=args.hash, fallback_extension=args.fallback_ext)

    try:
        stages = [build_stage(spec, config) for spec in args.stages]
        changes = transform(collect_inputs(args.paths), *stages)
    except (RenameError, ValueError, re.error, OSError) as e:
        print(f"Error: {e}")
        return 1

    if not changes:
        print("No files need renaming")
        return 0

    if args.dry_run:
        execute_plan(changes, RenameOptions(report=not args.quiet, dry_run=True))
        if args.log_dir:
            save_rename_log(changes, Path(args.log_dir), dry_run=True)
        print("\n[Preview mode] Will not actually execute")
        return 0

    if not args.yes:
        print_preview(changes)
        confirm = input("\nConfirm execution? (y/N): ").strip().lower()
        if confirm != 'y':
            print("Cancelled")
            return 0

    try:
        results = execute_plan(changes, RenameOptions(report=not args.quiet))
    except (RenameError, OSError) as e:
        print(f"Error: {e}")
        return 1

    if args.log_dir:
        log_file = save_rename_log(results, Path(args.log_dir))
        print(f"Log saved to {log_file}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
