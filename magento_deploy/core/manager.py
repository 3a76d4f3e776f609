# magento_deploy/core/manager.py
"""Deploy manager: collects deploy entries and dispatches them in role order

Packages are deployed core first, then modules, then themes. Modules and
themes are dispatched last-registered-first.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from .repository import InstalledRepository
from ..api.exceptions import AlreadyInitializedError, NotInitializedError
from ..models.package import Action, Package, PackageRole

if TYPE_CHECKING:
    from ..strategies.base import DeployStrategy
    from ..strategies.factory import StrategyFactory

logger = logging.getLogger(__name__)

POST_PACKAGE_UNINSTALL = "post-package-uninstall"


@dataclass(frozen=True)
class DeployEntry:
    """A package bound to the strategy that deploys it"""
    strategy: 'DeployStrategy'

    @property
    def package(self) -> Package:
        return self.strategy.package

    @property
    def role(self) -> Optional[PackageRole]:
        return PackageRole.from_type(self.strategy.package.type)


@dataclass(frozen=True)
class DispatchRecord:
    """One dispatched entry"""
    name: str
    role: PackageRole
    action: Action
    strategy: str

    @classmethod
    def from_entry(cls, entry: DeployEntry) -> 'DispatchRecord':
        return cls(
            name=entry.package.name,
            role=entry.role,
            action=entry.strategy.action,
            strategy=entry.strategy.name,
        )


@dataclass
class DeployReport:
    """Entries dispatched by one deploy_all run, in dispatch order"""
    dispatched: List[DispatchRecord] = field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return [record.name for record in self.dispatched]

    def count(self, role: PackageRole) -> int:
        """Number of dispatched entries with a role"""
        return sum(1 for record in self.dispatched if record.role is role)


class DeployManager:
    """Registry of deploy entries

    A manager must be bound to an installed repository and a strategy
    factory, exactly once, before use. Errors are never caught here; a
    failing strategy aborts deploy_all and leaves the remaining entries
    undispatched.
    """

    def __init__(self,
                 repository: Optional[InstalledRepository] = None,
                 factory: Optional['StrategyFactory'] = None):
        """
        Initialize deploy manager

        Args:
            repository: Source of all installed packages
            factory: Strategy resolver

        Both or neither must be given; a manager built without them has to
        be bound with :meth:`bind`.
        """
        self._repository: Optional[InstalledRepository] = None
        self._factory: Optional['StrategyFactory'] = None
        self._core_entry: Optional[DeployEntry] = None
        self._module_entries: List[DeployEntry] = []
        self._theme_entries: List[DeployEntry] = []

        if repository is not None or factory is not None:
            self.bind(repository, factory)

    def bind(self, repository: InstalledRepository, factory: 'StrategyFactory') -> None:
        """Bind the manager to its package source and strategy resolver

        Raises:
            AlreadyInitializedError: If the manager is already bound
        """
        if self.is_initialized:
            raise AlreadyInitializedError(self.__class__.__name__)
        if repository is None or factory is None:
            raise ValueError("Both repository and factory are required")

        self._repository = repository
        self._factory = factory

    @property
    def is_initialized(self) -> bool:
        return self._repository is not None and self._factory is not None

    @property
    def repository(self) -> InstalledRepository:
        self._require_initialized()
        return self._repository

    @property
    def factory(self) -> 'StrategyFactory':
        self._require_initialized()
        return self._factory

    def create_entry(self, package: Package, action: Action) -> DeployEntry:
        """Resolve the strategy for a package and wrap it in an entry

        Raises:
            UnsupportedPackageTypeError: If the package type has no strategy
        """
        return DeployEntry(self.factory.resolve(package, action))

    def register(self, entry: DeployEntry) -> Optional[PackageRole]:
        """Queue an entry under its package role

        A core entry replaces any queued core entry. Entries whose package
        type has no role are ignored.

        Args:
            entry: Entry to queue

        Returns:
            Role the entry was queued under, None if it was ignored
        """
        self._require_initialized()

        role = entry.role
        if role is PackageRole.CORE:
            if self._core_entry is not None:
                logger.debug(f"Replacing core entry {self._core_entry.package.name} "
                             f"with {entry.package.name}")
            self._core_entry = entry
        elif role is PackageRole.MODULE:
            self._module_entries.append(entry)
        elif role is PackageRole.THEME:
            self._theme_entries.append(entry)
        else:
            logger.debug(f"Ignoring {entry.package.name}: type {entry.package.type} has no deploy role")
            return None

        logger.debug(f"Registered {entry.package.name} as {role.name.lower()} "
                     f"({entry.strategy.action.value})")
        return role

    def deploy_all(self) -> DeployReport:
        """Deploy every installed package plus queued entries

        Every installed package is queued with the update action, then the
        core entry is dispatched, then modules, then themes.

        Returns:
            Report of dispatched entries
        """
        self._require_initialized()
        self._add_all_packages()

        report = DeployReport()

        if self._core_entry is not None:
            entry = self._core_entry
            self._dispatch(entry, report)
            self._core_entry = None

        while self._module_entries:
            self._dispatch(self._module_entries.pop(), report)

        while self._theme_entries:
            self._dispatch(self._theme_entries.pop(), report)

        logger.info(f"Deployed {len(report.dispatched)} package(s)")
        return report

    def plan(self) -> List[DeployEntry]:
        """Entries deploy_all would dispatch, in order, without queueing them"""
        self._require_initialized()

        core_entry = self._core_entry
        modules = list(self._module_entries)
        themes = list(self._theme_entries)
        for package in self.repository.get_packages():
            entry = self.create_entry(package, Action.UPDATE)
            if entry.role is PackageRole.CORE:
                core_entry = entry
            elif entry.role is PackageRole.MODULE:
                modules.append(entry)
            elif entry.role is PackageRole.THEME:
                themes.append(entry)

        ordered = [core_entry] if core_entry is not None else []
        return ordered + modules[::-1] + themes[::-1]

    def on_uninstall(self, package: Package) -> Optional[PackageRole]:
        """Queue removal of a package the dependency manager uninstalled

        Nothing is removed until the next deploy_all.

        Returns:
            Role the entry was queued under, None if it was ignored
        """
        self._require_initialized()
        return self.register(self.create_entry(package, Action.UNINSTALL))

    def on_post_package_uninstall(self, event) -> Optional[PackageRole]:
        """Handler for the dependency manager's post-package-uninstall event"""
        return self.on_uninstall(event.package)

    def pending(self) -> Dict[PackageRole, int]:
        """Number of queued entries per role"""
        self._require_initialized()
        return {
            PackageRole.CORE: 1 if self._core_entry is not None else 0,
            PackageRole.MODULE: len(self._module_entries),
            PackageRole.THEME: len(self._theme_entries),
        }

    @staticmethod
    def get_subscribed_events() -> Dict[str, str]:
        """Event names this manager listens to, mapped to handler names"""
        return {
            POST_PACKAGE_UNINSTALL: 'on_post_package_uninstall',
        }

    def _add_all_packages(self) -> None:
        for package in self.repository.get_packages():
            self.register(self.create_entry(package, Action.UPDATE))

    def _dispatch(self, entry: DeployEntry, report: DeployReport) -> None:
        logger.info(f"Deploying {entry.package} as {entry.role.name.lower()}")
        entry.strategy.deploy()
        report.dispatched.append(DispatchRecord.from_entry(entry))

    def _require_initialized(self) -> None:
        if not self.is_initialized:
            raise NotInitializedError(self.__class__.__name__)
