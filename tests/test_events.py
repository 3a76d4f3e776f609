"""Tests for the event dispatcher and deploy plugin"""

import pytest

from magento_deploy.api.exceptions import StrategyDeployError
from magento_deploy.events import DeployPlugin, EventDispatcher, PackageEvent, PackageEvents
from magento_deploy.models.package import PackageRole

from .conftest import FakeFactory, core, make_manager, module, theme


class Subscriber:

    def __init__(self, calls):
        self.calls = calls

    def get_subscribed_events(self):
        return {
            "post-install-cmd": [("first", 10), ("second",)],
            "post-update-cmd": "second",
        }

    def first(self, event):
        self.calls.append(("first", event.name))

    def second(self, event):
        self.calls.append(("second", event.name))


def test_listeners_run_by_priority() -> None:
    dispatcher = EventDispatcher()
    calls = []
    dispatcher.add_listener("post-install-cmd", lambda e: calls.append("low"), priority=-5)
    dispatcher.add_listener("post-install-cmd", lambda e: calls.append("default"))
    dispatcher.add_listener("post-install-cmd", lambda e: calls.append("high"), priority=5)
    dispatcher.add_listener("post-install-cmd", lambda e: calls.append("default-2"))

    dispatcher.dispatch(PackageEvents.POST_INSTALL_CMD)

    assert calls == ["high", "default", "default-2", "low"]


def test_subscriber_specs() -> None:
    dispatcher = EventDispatcher()
    calls = []
    dispatcher.add_subscriber(Subscriber(calls))

    dispatcher.dispatch("post-install-cmd")
    dispatcher.dispatch("post-update-cmd")

    assert calls == [
        ("first", "post-install-cmd"),
        ("second", "post-install-cmd"),
        ("second", "post-update-cmd"),
    ]


def test_dispatch_returns_event_with_data() -> None:
    dispatcher = EventDispatcher()
    package = module("acme/foo")

    event = dispatcher.dispatch("custom", package=package, dev_mode=True)

    assert event == PackageEvent(name="custom", package=package, data={"dev_mode": True})
    assert not dispatcher.has_listeners("custom")


def test_handler_errors_propagate() -> None:
    dispatcher = EventDispatcher()

    def boom(event):
        raise StrategyDeployError("boom")

    dispatcher.add_listener(PackageEvents.POST_UPDATE_CMD, boom)

    with pytest.raises(StrategyDeployError):
        dispatcher.dispatch("post-update-cmd")


class TestDeployPlugin:

    def test_post_install_cmd_deploys_everything(self) -> None:
        factory = FakeFactory()
        manager = make_manager([theme("acme/t"), module("acme/a"), core()], factory)
        dispatcher = EventDispatcher()
        plugin = DeployPlugin(manager)
        plugin.activate(dispatcher)

        dispatcher.dispatch(PackageEvents.POST_INSTALL_CMD)

        assert factory.log == ["magento/core", "acme/a", "acme/t"]
        assert plugin.last_report.names == factory.log

    def test_uninstall_event_queues_removal(self) -> None:
        factory = FakeFactory()
        manager = make_manager([], factory)
        dispatcher = EventDispatcher()
        DeployPlugin(manager).activate(dispatcher)

        dispatcher.dispatch(PackageEvents.POST_PACKAGE_UNINSTALL, package=module("acme/old"))

        assert factory.log == []
        assert manager.pending()[PackageRole.MODULE] == 1

        dispatcher.dispatch(PackageEvents.POST_UPDATE_CMD)

        assert factory.log == ["acme/old"]
