# magento_deploy/core/repository.py
"""Installed package repository"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..api.exceptions import ConfigError
from ..models.package import Package

logger = logging.getLogger(__name__)


class InstalledRepository:
    """All packages currently installed by the dependency manager

    Reads composer's installed.json, which is either a bare list of package
    records or an object with a ``packages`` list.
    """

    def __init__(self, installed_file: Optional[Path] = None,
                 packages: Optional[Iterable[Package]] = None):
        """
        Initialize repository

        Args:
            installed_file: installed.json path
            packages: Explicit package list, used instead of installed_file
        """
        self.installed_file = Path(installed_file) if installed_file else None
        self._packages: Optional[List[Package]] = None
        if packages is not None:
            self._packages = _dedupe(packages)

    def get_packages(self) -> List[Package]:
        """Get installed packages, deduplicated by name"""
        if self._packages is None:
            self._packages = self._load()
        return list(self._packages)

    def find_package(self, name: str) -> Optional[Package]:
        """Find an installed package by name"""
        for package in self.get_packages():
            if package.name == name:
                return package
        return None

    def refresh(self) -> None:
        """Force a reload of installed.json"""
        if self.installed_file is not None:
            self._packages = None

    def _load(self) -> List[Package]:
        if self.installed_file is None or not self.installed_file.exists():
            logger.info(f"No installed packages file: {self.installed_file}")
            return []

        try:
            with open(self.installed_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {self.installed_file}: {e}") from e

        if isinstance(data, dict):
            records = data.get('packages', [])
        else:
            records = data

        if not isinstance(records, list):
            raise ConfigError(f"Unexpected installed packages format in {self.installed_file}")

        packages = []
        for record in records:
            if not isinstance(record, dict) or not record.get('name'):
                logger.warning(f"Skipping malformed package record in {self.installed_file}")
                continue
            packages.append(Package.from_dict(record))

        logger.debug(f"Loaded {len(packages)} packages from {self.installed_file}")
        return _dedupe(packages)


def _dedupe(packages: Iterable[Package]) -> List[Package]:
    seen: Dict[str, Package] = {}
    for package in packages:
        seen.setdefault(package.name, package)
    return list(seen.values())
