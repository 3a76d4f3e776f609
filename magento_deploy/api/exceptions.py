"""Exception definitions for magento-deploy"""

from typing import Optional

from ..constants import ErrorCode


class MagentoDeployError(Exception):
    """Base exception for magento-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(MagentoDeployError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_ERROR)


class NotInitializedError(MagentoDeployError):
    """Deploy manager used before it was bound to a repository"""

    def __init__(self, component: str = "DeployManager"):
        message = (
            f"{component} is not initialized. "
            "Bind it to an installed repository and a strategy factory first."
        )
        super().__init__(message, ErrorCode.NOT_INITIALIZED)
        self.component = component


class AlreadyInitializedError(MagentoDeployError):
    """Deploy manager bound a second time"""

    def __init__(self, component: str = "DeployManager"):
        super().__init__(f"{component} is already initialized", ErrorCode.ALREADY_INITIALIZED)
        self.component = component


class UnsupportedPackageTypeError(MagentoDeployError):
    """No deploy strategy is registered for a package type"""

    def __init__(self, package_name: str, package_type: str):
        message = f"Unsupported package type '{package_type}' for package {package_name}"
        super().__init__(message, ErrorCode.UNSUPPORTED_PACKAGE_TYPE)
        self.package_name = package_name
        self.package_type = package_type


class StrategyDeployError(MagentoDeployError):
    """A deploy strategy failed to deploy a package"""

    def __init__(self, message: str, package_name: Optional[str] = None,
                 error_code: str = ErrorCode.STRATEGY_DEPLOY_FAILED):
        super().__init__(message, error_code)
        self.package_name = package_name


class SourceMissingError(StrategyDeployError):
    """Package source directory does not exist"""

    def __init__(self, package_name: str, source: str):
        message = f"Source not found for {package_name}: {source}"
        super().__init__(message, package_name, ErrorCode.SOURCE_MISSING)
        self.source = source


class TargetOccupiedError(StrategyDeployError):
    """Deploy target holds content this package did not create"""

    def __init__(self, package_name: str, target: str):
        message = (
            f"Target already exists and was not deployed by {package_name}: {target}. "
            "Use --force to overwrite."
        )
        super().__init__(message, package_name, ErrorCode.TARGET_OCCUPIED)
        self.target = target


class DeployIOError(StrategyDeployError):
    """Filesystem error raised while deploying"""

    def __init__(self, package_name: str, error: OSError):
        message = f"Filesystem error while deploying {package_name}: {error}"
        super().__init__(message, package_name, ErrorCode.DEPLOY_IO_ERROR)
        self.error = error
