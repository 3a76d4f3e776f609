"""Magento Deploy - deploy Magento core, module and theme packages.

Packages installed by the dependency manager into the vendor directory are
deployed into the Magento root directory with a per-package strategy
(symlink, copy or none): the core package first, then modules, then themes.
"""

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Core API
from .core.manager import DeployManager, DeployEntry, DeployReport, DispatchRecord
from .core.repository import InstalledRepository
from .core.path_resolver import PathResolver
from .strategies import (
    DeployStrategy,
    SymlinkStrategy,
    CopyStrategy,
    NoneStrategy,
    StrategyFactory,
)
from .events import EventDispatcher, DeployPlugin, PackageEvent, PackageEvents

# Data models
from .models import Package, PackageRole, Action, DeployConfig, DeployState

# Exceptions
from .api.exceptions import (
    MagentoDeployError,
    ConfigError,
    NotInitializedError,
    AlreadyInitializedError,
    UnsupportedPackageTypeError,
    StrategyDeployError,
    SourceMissingError,
    TargetOccupiedError,
    DeployIOError,
)


def create_manager(config: DeployConfig) -> DeployManager:
    """Build a deploy manager bound to the configured repository and root dir

    Args:
        config: Deployment configuration

    Returns:
        Initialized DeployManager
    """
    resolver = PathResolver(config)
    return DeployManager(
        repository=InstalledRepository(resolver.installed_file),
        factory=StrategyFactory(config, path_resolver=resolver),
    )


__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "DeployManager",
    "DeployEntry",
    "DeployReport",
    "DispatchRecord",
    "InstalledRepository",
    "PathResolver",
    "DeployStrategy",
    "SymlinkStrategy",
    "CopyStrategy",
    "NoneStrategy",
    "StrategyFactory",
    "EventDispatcher",
    "DeployPlugin",
    "PackageEvent",
    "PackageEvents",
    "create_manager",

    # Data models
    "Package",
    "PackageRole",
    "Action",
    "DeployConfig",
    "DeployState",

    # Exceptions
    "MagentoDeployError",
    "ConfigError",
    "NotInitializedError",
    "AlreadyInitializedError",
    "UnsupportedPackageTypeError",
    "StrategyDeployError",
    "SourceMissingError",
    "TargetOccupiedError",
    "DeployIOError",
]
