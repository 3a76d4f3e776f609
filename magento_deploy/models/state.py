# magento_deploy/models/state.py
"""Deployment state models"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Any

from .package import Package
from ..api.exceptions import ConfigError
from ..constants import DEPLOY_STATE_FILE, STATE_VERSION
from ..utils.file_utils import atomic_write

logger = logging.getLogger(__name__)


@dataclass
class PackageState:
    """What one deploy of a package left in the root directory"""
    name: str
    type: str
    version: str
    strategy: str
    paths: List[str] = field(default_factory=list)
    deployed_at: str = ""

    @property
    def package(self) -> Package:
        """Rebuild a package descriptor from the recorded state"""
        return Package(name=self.name, type=self.type, version=self.version)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'type': self.type,
            'version': self.version,
            'strategy': self.strategy,
            'paths': list(self.paths),
            'deployed_at': self.deployed_at,
        }

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> 'PackageState':
        """Create from dictionary"""
        return cls(
            name=name,
            type=data.get('type', ''),
            version=data.get('version', ''),
            strategy=data.get('strategy', ''),
            paths=list(data.get('paths', [])),
            deployed_at=data.get('deployed_at', ''),
        )


class DeployState:
    """Record of deployed target paths, stored as JSON in the root directory

    Paths are stored relative to the root directory.
    """

    def __init__(self, root_dir: Path):
        self.root_dir = Path(root_dir)
        self.state_file = self.root_dir / DEPLOY_STATE_FILE
        self._packages: Optional[Dict[str, PackageState]] = None

    @property
    def packages(self) -> Dict[str, PackageState]:
        """Get recorded packages (lazy loading)"""
        if self._packages is None:
            self._packages = self._load()
        return self._packages

    def _load(self) -> Dict[str, PackageState]:
        if not self.state_file.exists():
            return {}

        try:
            with open(self.state_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Corrupted deploy state file {self.state_file}: {e}") from e

        return {
            name: PackageState.from_dict(name, entry)
            for name, entry in data.get('packages', {}).items()
        }

    def get(self, name: str) -> Optional[PackageState]:
        """Get recorded state for a package"""
        return self.packages.get(name)

    def record(self, package: Package, strategy: str, paths: List[Path]) -> PackageState:
        """Record the target paths a deploy created and save

        Args:
            package: Deployed package
            strategy: Strategy name used
            paths: Absolute target paths created under the root directory

        Returns:
            The stored PackageState
        """
        entry = PackageState(
            name=package.name,
            type=package.type,
            version=package.version,
            strategy=strategy,
            paths=sorted({self._relative(p) for p in paths}),
            deployed_at=datetime.now().isoformat(),
        )
        self.packages[package.name] = entry
        self.save()
        return entry

    def forget(self, name: str) -> None:
        """Drop a package from the state and save"""
        if self.packages.pop(name, None) is not None:
            self.save()

    def missing_from(self, names) -> List[PackageState]:
        """Get recorded packages whose names are not in names"""
        names = set(names)
        return [entry for name, entry in sorted(self.packages.items()) if name not in names]

    def save(self) -> None:
        """Write state file atomically"""
        data = {
            'version': STATE_VERSION,
            'packages': {
                name: entry.to_dict()
                for name, entry in sorted(self.packages.items())
            },
        }
        self.root_dir.mkdir(parents=True, exist_ok=True)
        atomic_write(self.state_file, json.dumps(data, indent=2) + "\n")
        logger.debug(f"Saved deploy state: {self.state_file}")

    def _relative(self, path: Path) -> str:
        path = Path(path)
        try:
            return path.relative_to(self.root_dir).as_posix()
        except ValueError:
            return path.as_posix()
