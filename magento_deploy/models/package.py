"""Package data models"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional

from packaging.version import InvalidVersion, Version

from ..constants import (
    PACKAGE_TYPE_CORE,
    PACKAGE_TYPE_MODULE,
    PACKAGE_TYPE_THEME,
    DEFAULT_PACKAGE_TYPE,
)


class PackageRole(Enum):
    """Deploy role of a package, in deployment order"""
    CORE = PACKAGE_TYPE_CORE
    MODULE = PACKAGE_TYPE_MODULE
    THEME = PACKAGE_TYPE_THEME

    @classmethod
    def from_type(cls, package_type: str) -> Optional['PackageRole']:
        """Get role for a package type, None if the type has no role"""
        try:
            return cls(package_type)
        except ValueError:
            return None


class Action(Enum):
    """Why a package is being deployed"""
    INSTALL = "install"
    UPDATE = "update"
    UNINSTALL = "uninstall"


@dataclass(frozen=True)
class Package:
    """A package installed by the dependency manager"""

    name: str
    type: str = DEFAULT_PACKAGE_TYPE
    version: str = ""
    target_dir: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def role(self) -> Optional[PackageRole]:
        """Get PackageRole for this package's type"""
        return PackageRole.from_type(self.type)

    @property
    def normalized_version(self) -> str:
        """Get PEP 440 normalized version, raw version if it does not parse"""
        try:
            return str(Version(self.version))
        except InvalidVersion:
            return self.version

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "name": self.name,
            "type": self.type,
            "version": self.version,
        }
        if self.target_dir:
            data["target-dir"] = self.target_dir
        if self.extra:
            data["extra"] = self.extra
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Package':
        """Create from an installed.json record"""
        return cls(
            name=data["name"],
            type=data.get("type") or DEFAULT_PACKAGE_TYPE,
            version=str(data.get("version", "")),
            target_dir=data.get("target-dir") or None,
            extra=data.get("extra") or {},
        )

    def __str__(self) -> str:
        if self.version:
            return f"{self.name}:{self.version}"
        return self.name
