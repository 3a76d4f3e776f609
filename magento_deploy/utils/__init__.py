# magento_deploy/utils/__init__.py
"""Utility functions for magento-deploy"""

from .file_utils import atomic_write, remove_path, prune_empty_dirs, copy_path

__all__ = [
    'atomic_write',
    'remove_path',
    'prune_empty_dirs',
    'copy_path',
]
