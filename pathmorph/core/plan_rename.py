"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Build the default change for every input path (discriminator stripped)
- Run the stages over each change
- Drop changes that end up where they started
- Point out proposed names that will need a discriminator at apply time
"""

import logging
import os
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List

from .models_fs import Change
from .scan_files import flatten_paths
from .stages import Stage, compose

logger = logging.getLogger(__name__)


def transform(files: Any, *stages: Stage) -> List[Change]:
    """
    Return the list of changes produced by running stages over files

    Args:
        files: Paths to rename, may be arbitrarily nested
        stages: Stages applied in order to each change

    Returns:
        Changes whose proposed path differs from the original, in input order
    """
    pipeline = compose(*stages)
    changes: List[Change] = []

    for path in flatten_paths(files):
        change = pipeline(Change.from_path(path))
        if change.is_noop:
            continue
        changes.append(change)

    logger.debug("Planned %d changes", len(changes))
    return changes


def find_collisions(changes: List[Change]) -> Dict[Path, List[Change]]:
    """
    Find proposed paths that cannot all be used as-is

    A proposed path collides when several changes want it, or when a file
    already sits there and is not moved away earlier in the plan. Collisions
    are not errors; apply resolves them with discriminators in plan order.

    Returns:
        Proposed path -> changes that want it
    """
    wanted: Dict[Path, List[int]] = defaultdict(list)
    for i, c in enumerate(changes):
        wanted[c.new].append(i)

    moved_at = {c.old: i for i, c in enumerate(changes)}
    collisions: Dict[Path, List[Change]] = {}
    for target, indexes in wanted.items():
        vacated = moved_at.get(target, len(changes)) < indexes[0]
        occupied = os.path.lexists(target) and not vacated
        if len(indexes) > 1 or occupied:
            collisions[target] = [changes[i] for i in indexes]

    return collisions
