"""Shared fixtures for magento-deploy tests"""

import json
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from magento_deploy.api.exceptions import StrategyDeployError, UnsupportedPackageTypeError
from magento_deploy.constants import PACKAGE_TYPE_CORE, PACKAGE_TYPE_MODULE, PACKAGE_TYPE_THEME
from magento_deploy.core.manager import DeployManager
from magento_deploy.core.repository import InstalledRepository
from magento_deploy.models.config import DeployConfig
from magento_deploy.models.package import Action, Package
from magento_deploy.strategies.base import DeployStrategy
from magento_deploy.strategies.factory import StrategyFactory


class RecordingStrategy(DeployStrategy):
    """Strategy that records dispatches instead of touching the filesystem"""

    name = "recording"

    def __init__(self, package: Package, action: Action, log: List, fail: bool = False):
        super().__init__(package, Path("/vendor") / package.name, Path("/htdocs"), action, state=None)
        self.log = log
        self.fail = fail

    def deploy(self) -> None:
        if self.fail:
            raise StrategyDeployError(f"failed to deploy {self.package.name}", self.package.name)
        self.log.append(self.package.name)

    def deploy_mapping(self, mapping, source, target, owned, created):
        pass


class FakeFactory:
    """Strategy resolver handing out RecordingStrategy instances"""

    known_types = {PACKAGE_TYPE_CORE, PACKAGE_TYPE_MODULE, PACKAGE_TYPE_THEME, "library"}

    def __init__(self, failing=()):
        self.log: List[str] = []
        self.failing = set(failing)
        self.resolved: List[tuple] = []

    def resolve(self, package: Package, action: Action) -> RecordingStrategy:
        if package.type not in self.known_types:
            raise UnsupportedPackageTypeError(package.name, package.type)
        self.resolved.append((package.name, action))
        return RecordingStrategy(package, action, self.log, fail=package.name in self.failing)


def core(name: str = "magento/core") -> Package:
    return Package(name=name, type=PACKAGE_TYPE_CORE, version="1.9.4.5")


def module(name: str) -> Package:
    return Package(name=name, type=PACKAGE_TYPE_MODULE, version="1.0.0")


def theme(name: str) -> Package:
    return Package(name=name, type=PACKAGE_TYPE_THEME, version="1.0.0")


@pytest.fixture
def fake_factory() -> FakeFactory:
    return FakeFactory()


def make_manager(packages=(), factory: Optional[FakeFactory] = None) -> DeployManager:
    return DeployManager(
        repository=InstalledRepository(packages=list(packages)),
        factory=factory or FakeFactory(),
    )


def write_files(base: Path, files: Dict[str, str]) -> None:
    """Create files relative to base"""
    for relative, content in files.items():
        path = base / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project directory with an empty vendor dir and Magento root"""
    (tmp_path / "vendor" / "composer").mkdir(parents=True)
    (tmp_path / "htdocs").mkdir()
    return tmp_path


@pytest.fixture
def config(project: Path) -> DeployConfig:
    return DeployConfig(root_dir=Path("htdocs"), base_dir=project)


@pytest.fixture
def factory(config: DeployConfig) -> StrategyFactory:
    return StrategyFactory(config)


def write_installed(project: Path, packages: List[Package]) -> Path:
    """Write vendor/composer/installed.json for packages"""
    installed_file = project / "vendor" / "composer" / "installed.json"
    installed_file.parent.mkdir(parents=True, exist_ok=True)
    installed_file.write_text(json.dumps({"packages": [p.to_dict() for p in packages]}))
    return installed_file
