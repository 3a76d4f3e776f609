# magento_deploy/strategies/factory.py
"""Deploy strategy factory"""

from typing import Dict, Optional, Type

from .base import DeployStrategy
from .copy import CopyStrategy
from .none import NoneStrategy
from .symlink import SymlinkStrategy
from ..api.exceptions import ConfigError, UnsupportedPackageTypeError
from ..constants import (
    PACKAGE_TYPE_CORE,
    PACKAGE_TYPE_MODULE,
    PACKAGE_TYPE_THEME,
    STRATEGY_COPY,
    STRATEGY_NONE,
    STRATEGY_SYMLINK,
)
from ..core.path_resolver import PathResolver
from ..models.config import DeployConfig
from ..models.package import Action, Package
from ..models.state import DeployState


class StrategyFactory:
    """Resolves the deploy strategy for a package and action"""

    # Registry of strategy implementations
    _strategies: Dict[str, Type[DeployStrategy]] = {
        STRATEGY_SYMLINK: SymlinkStrategy,
        STRATEGY_COPY: CopyStrategy,
        STRATEGY_NONE: NoneStrategy,
    }

    def __init__(self, config: DeployConfig,
                 path_resolver: Optional[PathResolver] = None,
                 state: Optional[DeployState] = None):
        """
        Initialize factory

        Args:
            config: Deployment configuration
            path_resolver: Path resolver (built from config if omitted)
            state: Deploy state (loaded from the root dir if omitted)
        """
        self.config = config
        self.path_resolver = path_resolver or PathResolver(config)
        self.state = state or DeployState(self.path_resolver.root_dir)
        # Package type -> fixed strategy name, None uses the configured strategy.
        # The core package must be real files in the root.
        self._types: Dict[str, Optional[str]] = {
            PACKAGE_TYPE_CORE: STRATEGY_COPY,
            PACKAGE_TYPE_MODULE: None,
            PACKAGE_TYPE_THEME: None,
        }
        for package_type in config.ignored_types:
            self._types.setdefault(package_type, STRATEGY_NONE)

    def resolve(self, package: Package, action: Action) -> DeployStrategy:
        """Create the deploy strategy for a package

        Args:
            package: Package descriptor
            action: Why the package is deployed

        Returns:
            Strategy instance, not yet run

        Raises:
            UnsupportedPackageTypeError: If the package type has no strategy
        """
        strategy_name = self.strategy_name_for(package)
        strategy_class = self._strategies[strategy_name]
        return strategy_class(
            package=package,
            source_dir=self.path_resolver.get_source_dir(package),
            target_dir=self.path_resolver.get_target_dir(),
            action=action,
            state=self.state,
            force=self.config.force,
        )

    def strategy_name_for(self, package: Package) -> str:
        """Get the strategy name a package deploys with

        Raises:
            UnsupportedPackageTypeError: If the package type has no strategy
        """
        if package.type not in self._types:
            raise UnsupportedPackageTypeError(package.name, package.type)

        strategy_name = self._types[package.type] or self.config.strategy_for(package.name)
        if strategy_name not in self._strategies:
            raise ConfigError(f"Unknown deploy strategy: {strategy_name}")
        return strategy_name

    def supports(self, package: Package) -> bool:
        """Check if a package type has a strategy"""
        return package.type in self._types

    def register_type(self, package_type: str, strategy_name: Optional[str] = None) -> None:
        """Register a package type

        Args:
            package_type: Package type string
            strategy_name: Fixed strategy, None to use the configured one
        """
        if strategy_name is not None and strategy_name not in self._strategies:
            raise ConfigError(f"Unknown deploy strategy: {strategy_name}")
        self._types[package_type] = strategy_name

    @classmethod
    def register_strategy(cls, name: str, strategy_class: Type[DeployStrategy]) -> None:
        """Register a new strategy implementation

        Args:
            name: Strategy name
            strategy_class: DeployStrategy subclass
        """
        cls._strategies[name] = strategy_class

    @classmethod
    def get_supported_strategies(cls) -> list[str]:
        """Get list of supported strategy names"""
        return sorted(cls._strategies.keys())
