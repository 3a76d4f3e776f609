# magento_deploy/strategies/base.py
"""Deploy strategy abstract base class"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Set

from ..api.exceptions import DeployIOError, SourceMissingError, TargetOccupiedError
from ..core.mapping import Mapping, load_mappings
from ..models.package import Action, Package
from ..models.state import DeployState
from ..utils.file_utils import prune_empty_dirs, remove_path

logger = logging.getLogger(__name__)


class DeployStrategy(ABC):
    """Moves one package's content from its source dir into the root dir

    Constructing a strategy never touches the filesystem; all work happens
    in :meth:`deploy`.
    """

    name: str = ""

    def __init__(self,
                 package: Package,
                 source_dir: Path,
                 target_dir: Path,
                 action: Action,
                 state: DeployState,
                 force: bool = False):
        """
        Initialize deploy strategy

        Args:
            package: Package to deploy
            source_dir: Directory the package is deployed from
            target_dir: Root directory the package is deployed into
            action: Why the package is being deployed
            state: Record of previously deployed paths
            force: Replace content at targets this package did not create
        """
        self.package = package
        self.source_dir = Path(source_dir)
        self.target_dir = Path(target_dir)
        self.action = action
        self.state = state
        self.force = force

    def deploy(self) -> None:
        """Run the strategy for its action

        Raises:
            SourceMissingError: Source dir missing on install/update
            TargetOccupiedError: Target holds foreign content
            DeployIOError: Any filesystem error
        """
        logger.info(f"{self.action.value} {self.package} ({self.name})")
        try:
            if self.action is Action.UNINSTALL:
                self.remove()
            else:
                self.create()
        except OSError as e:
            raise DeployIOError(self.package.name, e) from e

    def create(self) -> None:
        """Deploy every mapping and record the created paths

        Paths written before a failure are recorded together with the
        paths already owned, so a later run can redeploy over them.
        """
        if not self.source_dir.is_dir():
            raise SourceMissingError(self.package.name, str(self.source_dir))

        owned = self._owned_paths()
        created: List[Path] = []
        try:
            for mapping in load_mappings(self.package, self.source_dir):
                source = mapping.source_path(self.source_dir)
                if not source.exists() and not source.is_symlink():
                    raise SourceMissingError(self.package.name, str(source))
                self.deploy_mapping(mapping, source, mapping.target_path(self.target_dir), owned, created)
        except Exception:
            if owned or created:
                self.state.record(self.package, self.name, list(owned | set(created)))
            raise

        self._remove_stale(owned - set(created))
        self.state.record(self.package, self.name, created)

    def remove(self) -> None:
        """Remove everything a previous deploy of the package recorded

        Without a record nothing is removed: the targets may hold files of
        the core package or of other packages.
        """
        paths = sorted(self._owned_paths(), reverse=True)
        if not paths:
            logger.warning(f"Nothing recorded to remove for {self.package.name}")

        for path in paths:
            if remove_path(path):
                logger.debug(f"Removed {path}")
                prune_empty_dirs(path, self.target_dir)

        self.state.forget(self.package.name)

    @abstractmethod
    def deploy_mapping(self, mapping: Mapping, source: Path, target: Path,
                       owned: Set[Path], created: List[Path]) -> None:
        """
        Deploy one mapping

        Args:
            mapping: Mapping being deployed
            source: Absolute source path (exists)
            target: Absolute target path
            owned: Paths a previous deploy of this package created
            created: Target paths written so far, appended to as each one is made
        """
        pass

    def claim(self, target: Path, owned: Set[Path]) -> None:
        """Clear a target that is in the way, or fail if it is foreign content"""
        if target.is_symlink():
            target.unlink()
        elif target.exists():
            if target not in owned and not self.force:
                raise TargetOccupiedError(self.package.name, str(target))
            remove_path(target)

    def _owned_paths(self) -> Set[Path]:
        previous = self.state.get(self.package.name)
        if previous is None:
            return set()
        return {self.target_dir / path for path in previous.paths}

    def _remove_stale(self, stale: Set[Path]) -> None:
        for path in sorted(stale, reverse=True):
            if remove_path(path):
                logger.debug(f"Removed stale {path}")
                prune_empty_dirs(path, self.target_dir)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(package={self.package.name!r}, "
            f"action={self.action.value!r})"
        )

