# magento_deploy/strategies/__init__.py
"""Deploy strategies for magento-deploy"""

from .base import DeployStrategy
from .symlink import SymlinkStrategy
from .copy import CopyStrategy
from .none import NoneStrategy
from .factory import StrategyFactory

__all__ = [
    'DeployStrategy',
    'SymlinkStrategy',
    'CopyStrategy',
    'NoneStrategy',
    'StrategyFactory',
]
