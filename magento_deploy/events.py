# magento_deploy/events.py
"""Dependency manager lifecycle events and dispatcher

The deploy manager reacts to lifecycle events emitted by the dependency
manager. Subscribers declare the events they handle through
``get_subscribed_events()``, which maps an event name to a handler name, a
``(handler, priority)`` tuple, or a list of such tuples.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .core.manager import DeployManager, DeployReport
from .models.package import Package

logger = logging.getLogger(__name__)


class PackageEvents(Enum):
    """Lifecycle events of the dependency manager"""
    POST_PACKAGE_INSTALL = "post-package-install"
    POST_PACKAGE_UPDATE = "post-package-update"
    POST_PACKAGE_UNINSTALL = "post-package-uninstall"
    POST_INSTALL_CMD = "post-install-cmd"
    POST_UPDATE_CMD = "post-update-cmd"


@dataclass
class PackageEvent:
    """Event passed to handlers"""
    name: str
    package: Optional[Package] = None
    data: Dict[str, Any] = field(default_factory=dict)


class EventDispatcher:
    """Calls subscribed handlers for an event, highest priority first

    Handler exceptions propagate to the caller of :meth:`dispatch`.
    """

    def __init__(self):
        self._listeners: Dict[str, List[Tuple[int, int, Callable]]] = {}
        self._sequence = 0

    def add_listener(self, event_name: Union[str, PackageEvents],
                     handler: Callable, priority: int = 0) -> None:
        """
        Register a handler

        Args:
            event_name: Event name
            handler: Callable receiving a PackageEvent
            priority: Higher runs first; equal priorities run in registration order
        """
        name = _event_name(event_name)
        self._sequence += 1
        listeners = self._listeners.setdefault(name, [])
        listeners.append((priority, self._sequence, handler))
        listeners.sort(key=lambda item: (-item[0], item[1]))

    def add_subscriber(self, subscriber) -> None:
        """Register every handler a subscriber declares"""
        for event_name, declared in subscriber.get_subscribed_events().items():
            for method_name, priority in _handlers(declared):
                self.add_listener(event_name, getattr(subscriber, method_name), priority)

    def dispatch(self, event_name: Union[str, PackageEvents],
                 package: Optional[Package] = None, **data) -> PackageEvent:
        """
        Dispatch an event

        Args:
            event_name: Event name
            package: Package the event concerns
            **data: Extra event data

        Returns:
            The dispatched event
        """
        event = PackageEvent(name=_event_name(event_name), package=package, data=data)
        for _, _, handler in self._listeners.get(event.name, []):
            logger.debug(f"Dispatching {event.name} to {getattr(handler, '__qualname__', handler)}")
            handler(event)
        return event

    def has_listeners(self, event_name: Union[str, PackageEvents]) -> bool:
        return bool(self._listeners.get(_event_name(event_name)))


class DeployPlugin:
    """Connects a deploy manager to the dependency manager's events

    Uninstall events queue removals; the end of an install or update
    command deploys everything.
    """

    def __init__(self, manager: DeployManager):
        self.manager = manager
        self.last_report: Optional[DeployReport] = None

    def activate(self, dispatcher: EventDispatcher) -> None:
        """Subscribe the manager and this plugin"""
        dispatcher.add_subscriber(self.manager)
        dispatcher.add_subscriber(self)

    def get_subscribed_events(self) -> Dict[str, Any]:
        return {
            PackageEvents.POST_INSTALL_CMD.value: 'on_post_cmd',
            PackageEvents.POST_UPDATE_CMD.value: 'on_post_cmd',
        }

    def on_post_cmd(self, event: PackageEvent) -> None:
        self.last_report = self.manager.deploy_all()


def _event_name(event_name: Union[str, PackageEvents]) -> str:
    if isinstance(event_name, PackageEvents):
        return event_name.value
    return event_name


def _handlers(declared) -> List[Tuple[str, int]]:
    if isinstance(declared, str):
        return [(declared, 0)]
    if isinstance(declared, tuple):
        return [(declared[0], declared[1] if len(declared) > 1 else 0)]
    return [item for entry in declared for item in _handlers(entry)]
