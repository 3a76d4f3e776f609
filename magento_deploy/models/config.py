# magento_deploy/models/config.py
"""Configuration data models"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Any, Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import (
    CONFIG_VERSION,
    DEFAULT_DEPLOY_STRATEGY,
    DEFAULT_IGNORED_TYPES,
    DEFAULT_INSTALLED_FILE,
    DEFAULT_VENDOR_DIR,
    ENV_DEPLOY_STRATEGY,
    ENV_ROOT_DIR,
    ENV_VENDOR_DIR,
    PROJECT_CONFIG_FILE,
)


@dataclass
class DeployConfig:
    """Deployment configuration

    This represents the configuration stored in .magento-deploy.yaml.
    Relative paths are resolved against ``base_dir``.
    """
    root_dir: Path
    base_dir: Path = field(default_factory=Path.cwd)
    vendor_dir: Path = Path(DEFAULT_VENDOR_DIR)
    installed_file: Optional[Path] = None
    deploy_strategy: str = DEFAULT_DEPLOY_STRATEGY
    strategy_overrides: Dict[str, str] = field(default_factory=dict)
    force: bool = False
    ignored_types: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORED_TYPES))
    version: str = CONFIG_VERSION

    def __post_init__(self):
        """Resolve paths and check strategy values"""
        self.base_dir = Path(self.base_dir).resolve()
        self.root_dir = self._resolve(self.root_dir)
        self.vendor_dir = self._resolve(self.vendor_dir)
        if self.installed_file is None:
            self.installed_file = self.vendor_dir / DEFAULT_INSTALLED_FILE
        else:
            self.installed_file = self._resolve(self.installed_file)

        _check_strategy(self.deploy_strategy, "deploy_strategy")
        for name, strategy in self.strategy_overrides.items():
            _check_strategy(strategy, f"strategy_overrides[{name}]")

    def _resolve(self, path) -> Path:
        path = Path(os.path.expanduser(os.path.expandvars(str(path))))
        if path.is_absolute():
            return path
        return (self.base_dir / path).resolve()

    def strategy_for(self, package_name: str) -> str:
        """Get configured strategy name for a package

        Args:
            package_name: Package name (vendor/name)

        Returns:
            Strategy name
        """
        return self.strategy_overrides.get(package_name, self.deploy_strategy)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'version': self.version,
            'root_dir': str(self.root_dir),
            'vendor_dir': str(self.vendor_dir),
            'installed_file': str(self.installed_file),
            'deploy_strategy': self.deploy_strategy,
            'strategy_overrides': dict(self.strategy_overrides),
            'force': self.force,
            'ignored_types': list(self.ignored_types),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> 'DeployConfig':
        """Create DeployConfig from dictionary

        Args:
            data: Configuration dictionary
            base_dir: Directory relative paths are resolved against

        Returns:
            DeployConfig instance
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        root_dir = data.get('root_dir')
        if not root_dir:
            raise ConfigError("Missing required configuration key: root_dir")

        ignored_types = data.get('ignored_types')
        if ignored_types is None:
            ignored_types = list(DEFAULT_IGNORED_TYPES)
        elif not isinstance(ignored_types, list):
            raise ConfigError("ignored_types must be a list of package types")

        overrides = data.get('strategy_overrides') or {}
        if not isinstance(overrides, dict):
            raise ConfigError("strategy_overrides must be a mapping of package name to strategy")

        return cls(
            root_dir=Path(root_dir),
            base_dir=base_dir or Path.cwd(),
            vendor_dir=Path(data.get('vendor_dir') or DEFAULT_VENDOR_DIR),
            installed_file=Path(data['installed_file']) if data.get('installed_file') else None,
            deploy_strategy=data.get('deploy_strategy') or DEFAULT_DEPLOY_STRATEGY,
            strategy_overrides={str(k): str(v) for k, v in overrides.items()},
            force=bool(data.get('force', False)),
            ignored_types=[str(t) for t in ignored_types],
            version=str(data.get('version', CONFIG_VERSION)),
        )

    @classmethod
    def load(cls, config_path: Optional[Path] = None,
             overrides: Optional[Dict[str, Any]] = None) -> 'DeployConfig':
        """Load configuration from yaml, environment and explicit overrides

        Precedence is overrides, then environment, then the config file.

        Args:
            config_path: Config file path, searched upward from cwd if omitted
            overrides: Values taking precedence over everything else

        Returns:
            DeployConfig instance
        """
        if config_path is None:
            config_path = find_config_file()

        data: Dict[str, Any] = {}
        base_dir = Path.cwd()
        if config_path is not None:
            config_path = Path(config_path)
            if not config_path.is_file():
                raise ConfigError(f"Config file not found: {config_path}")
            try:
                with open(config_path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"Config file must contain a mapping: {config_path}")
            base_dir = config_path.resolve().parent

        env_values = {
            'root_dir': os.environ.get(ENV_ROOT_DIR),
            'vendor_dir': os.environ.get(ENV_VENDOR_DIR),
            'deploy_strategy': os.environ.get(ENV_DEPLOY_STRATEGY),
        }
        data.update({k: v for k, v in env_values.items() if v})
        data.update({k: v for k, v in (overrides or {}).items() if v is not None})

        return cls.from_dict(data, base_dir=base_dir)


def find_config_file(start_path: Optional[Path] = None) -> Optional[Path]:
    """Find the project config file, walking up from start_path

    Args:
        start_path: Starting directory (defaults to cwd)

    Returns:
        Path to config file or None if not found
    """
    current = Path(start_path or Path.cwd()).resolve()
    for directory in [current, *current.parents]:
        candidate = directory / PROJECT_CONFIG_FILE
        if candidate.is_file():
            return candidate
    return None


def _check_strategy(strategy: str, key: str) -> None:
    if not isinstance(strategy, str) or not strategy.strip():
        raise ConfigError(f"Deploy strategy for {key} must be a non-empty string")
