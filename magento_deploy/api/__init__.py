# magento_deploy/api/__init__.py
"""Public API surface for magento-deploy"""

from .exceptions import (
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

__all__ = [
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
