"""Core functionality for magento-deploy"""

from .path_resolver import PathResolver
from .repository import InstalledRepository
from .mapping import Mapping, load_mappings, parse_modman
from .manager import DeployManager, DeployEntry, DeployReport, DispatchRecord

__all__ = [
    "PathResolver",
    "InstalledRepository",
    "Mapping",
    "load_mappings",
    "parse_modman",
    "DeployManager",
    "DeployEntry",
    "DeployReport",
    "DispatchRecord",
]
