"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Move files without ever replacing an existing one
- Pick the next free discriminator when the proposed name is taken
- Apply a plan one change at a time, in order, with optional reporting
- dry_run support
"""

import json
import logging
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, List, Optional

from .discriminator import add_discriminator
from .errors import OverwriteAttempted
from .models_fs import Change, RenameOptions
from .plan_rename import transform
from .report import print_change
from .stages import Stage

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


def _exists(path: Path) -> bool:
    # A dangling symlink still occupies the name
    return os.path.lexists(path)


def _is_case_only_rename(src: Path, dst: Path) -> bool:
    # dst only "exists" because the filesystem ignores case
    if not Change(old=src, new=dst).is_case_only_change:
        return False
    try:
        return os.path.samefile(src, dst) and dst.name not in os.listdir(dst.parent)
    except OSError:
        return False


def move_no_replace(src: Path, dst: Path) -> Path:
    """
    Move src to dst, failing if dst exists

    Hard-link then unlink, so a target created after our existence checks is
    never replaced. Where hard links are unavailable (another device, some
    filesystems) falls back to check-then-move.

    Raises:
        OverwriteAttempted: dst exists
    """
    src, dst = Path(src), Path(dst)

    if _exists(dst):
        if _is_case_only_rename(src, dst):
            os.rename(src, dst)
            return dst
        raise OverwriteAttempted(src, dst)

    try:
        os.link(src, dst, follow_symlinks=False)
    except FileExistsError:
        raise OverwriteAttempted(src, dst) from None
    except (OSError, NotImplementedError) as e:
        logger.debug("Hard link %s -> %s unavailable (%s), moving directly", src, dst, e)
        if _exists(dst):
            raise OverwriteAttempted(src, dst)
        shutil.move(str(src), str(dst))
        return dst

    try:
        os.unlink(src)
    except OSError:
        os.unlink(dst)
        raise
    return dst


def safely_rename(old: Path, new: Path) -> Path:
    """
    Rename old path to new path without overwriting other files

    If new is taken, tries new(1), new(2), ... in the same directory and
    uses the first free one. new is assumed to carry no discriminator.

    Returns:
        Path the file actually ended up at
    """
    old, new = Path(old), Path(new)

    if not _exists(new) or _is_case_only_rename(old, new):
        logger.debug("Moving %s -> %s", old, new)
        return move_no_replace(old, new)

    number = 1
    while True:
        candidate = add_discriminator(new, number)
        if not _exists(candidate):
            logger.debug("Moving %s -> %s (%s taken)", old, candidate, new.name)
            return move_no_replace(old, candidate)
        number += 1


def execute_plan(
    changes: List[Change],
    options: Optional[RenameOptions] = None,
    progress_callback: Optional[ProgressCallback] = None
) -> List[Change]:
    """
    Apply changes strictly in order

    The first error stops the run; files already moved stay moved.

    Args:
        changes: Planned changes
        options: report / dry_run
        progress_callback: Progress callback (current, total, message)

    Returns:
        Changes with `new` set to the path actually used (the planned path on dry run)
    """
    if options is None:
        options = RenameOptions()

    results: List[Change] = []
    total = len(changes)

    for i, change in enumerate(changes):
        if progress_callback:
            prefix = "[Preview] " if options.dry_run else ""
            progress_callback(i + 1, total, f"{prefix}{change.old.name} -> {change.new.name}")

        if not options.dry_run:
            change = change.with_new(safely_rename(change.old, change.new))

        if options.report:
            print_change(change)
        results.append(change)

    return results


def rename(files: Any, *stages: Stage, options: Optional[RenameOptions] = None) -> List[Change]:
    """
    Rename files using stages

    Args:
        files: Paths to rename, may be arbitrarily nested
        stages: Stages taking a change and returning a modified change
        options: report (default True) and dry_run (default False)

    Returns:
        Resulting changes, with `new` being the planned path on dry run and
        the path actually used otherwise
    """
    return execute_plan(transform(files, *stages), options)


def save_rename_log(changes: List[Change], log_dir: Path, dry_run: bool = False) -> Path:
    """Save the applied (or previewed) renames as JSON"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir / f"rename_{'plan' if dry_run else 'result'}_{timestamp}.json"

    data = {
        "timestamp": timestamp,
        "dry_run": dry_run,
        "total_ops": len(changes),
        "operations": [
            {"old": str(c.old), "new": str(c.new)}
            for c in changes
        ],
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    return log_file
