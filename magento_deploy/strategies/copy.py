"""Copy deploy strategy"""

from pathlib import Path
from typing import List, Set

from .base import DeployStrategy
from ..constants import STRATEGY_COPY
from ..core.mapping import Mapping
from ..utils.file_utils import copy_path


class CopyStrategy(DeployStrategy):
    """Copy package files into the root directory

    Directories are merged; every copied file is recorded so that an
    uninstall removes exactly the files this package put there.
    """

    name = STRATEGY_COPY

    def deploy_mapping(self, mapping: Mapping, source: Path, target: Path,
                       owned: Set[Path], created: List[Path]) -> None:
        if not source.is_dir():
            self._copy_file(source, target, owned, created)
            return

        if target.is_symlink() or (target.exists() and not target.is_dir()):
            self.claim(target, owned)

        for item in sorted(source.rglob('*')):
            if item.is_dir() and not item.is_symlink():
                continue
            self._copy_file(item, target / item.relative_to(source), owned, created)

    def _copy_file(self, source: Path, target: Path, owned: Set[Path],
                   created: List[Path]) -> None:
        if target.is_symlink() or target.is_dir() or (target.exists() and target not in owned):
            self.claim(target, owned)
        copy_path(source, target)
        created.append(target)
