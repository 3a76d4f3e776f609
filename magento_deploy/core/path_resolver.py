"""Path resolution module for magento-deploy"""

from pathlib import Path

from ..constants import DEPLOY_STATE_FILE
from ..models.config import DeployConfig
from ..models.package import Package


class PathResolver:
    """Resolves package source and deploy target paths"""

    def __init__(self, config: DeployConfig):
        """Initialize path resolver

        Args:
            config: Deployment configuration
        """
        self.config = config

    @property
    def root_dir(self) -> Path:
        """Application root directory that packages are deployed into"""
        return self.config.root_dir

    @property
    def vendor_dir(self) -> Path:
        """Dependency manager's vendor directory"""
        return self.config.vendor_dir

    @property
    def installed_file(self) -> Path:
        """Dependency manager's record of installed packages"""
        return self.config.installed_file

    @property
    def state_file(self) -> Path:
        """Deploy state file inside the root directory"""
        return self.root_dir / DEPLOY_STATE_FILE

    def get_package_base_path(self, package: Package) -> Path:
        """Get the directory the dependency manager installed a package into

        Args:
            package: Package descriptor

        Returns:
            Path under the vendor directory
        """
        return self.vendor_dir / package.name

    def get_source_dir(self, package: Package) -> Path:
        """Get the directory a package is deployed from

        Args:
            package: Package descriptor

        Returns:
            Base path, joined with the package's target-dir when it has one
        """
        base_path = self.get_package_base_path(package)
        if package.target_dir:
            return base_path / package.target_dir
        return base_path

    def get_target_dir(self) -> Path:
        """Get the directory every package is deployed into"""
        return self.root_dir
