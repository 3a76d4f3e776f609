# magento_deploy/cli/commands/__init__.py
"""CLI commands"""

from . import deploy
from . import packages
from . import config

__all__ = [
    "deploy",
    "packages",
    "config",
]
