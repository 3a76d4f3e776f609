# magento_deploy/models/__init__.py
"""Data models for magento-deploy"""

from .package import Package, PackageRole, Action
from .config import DeployConfig, find_config_file
from .state import DeployState, PackageState

__all__ = [
    "Package",
    "PackageRole",
    "Action",
    "DeployConfig",
    "find_config_file",
    "DeployState",
    "PackageState",
]
