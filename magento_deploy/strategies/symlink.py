"""Symlink deploy strategy"""

import os
from pathlib import Path
from typing import List, Set

from .base import DeployStrategy
from ..constants import STRATEGY_SYMLINK
from ..core.mapping import Mapping


class SymlinkStrategy(DeployStrategy):
    """Link package content into the root directory with relative symlinks

    When a mapped directory already exists as a real directory in the root
    (for example ``app`` provided by the core package) the strategy descends
    into it and links the children instead.
    """

    name = STRATEGY_SYMLINK

    def deploy_mapping(self, mapping: Mapping, source: Path, target: Path,
                       owned: Set[Path], created: List[Path]) -> None:
        self._link(source, target, owned, created)

    def _link(self, source: Path, target: Path, owned: Set[Path], created: List[Path]) -> None:
        if (target.is_dir() and not target.is_symlink() and source.is_dir()
                and target not in owned):
            for child in sorted(source.iterdir()):
                self._link(child, target / child.name, owned, created)
            return

        link_source = Path(os.path.relpath(source, target.parent))
        if target.is_symlink() and Path(os.readlink(target)) == link_source:
            created.append(target)
            return

        self.claim(target, owned)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.symlink_to(link_source, target_is_directory=source.is_dir())
        created.append(target)
