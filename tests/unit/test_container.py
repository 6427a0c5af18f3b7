"""
Unit tests for the service container.
"""

import pytest

from indexlog.core.container import ServiceContainer, get_container
from indexlog.core.interfaces.logger import ILogger
from indexlog.services.logging import NullLogger


class TestServiceContainer:
    def test_global_instance(self):
        assert get_container() is get_container()

    def test_reset(self):
        before = get_container()
        ServiceContainer.reset()
        assert get_container() is not before

    def test_singleton_created_lazily_once(self):
        calls = []

        def factory():
            calls.append(1)
            return NullLogger()

        container = ServiceContainer()
        container.register_singleton(ILogger, factory)
        assert calls == []
        assert container.resolve(ILogger) is container.resolve(ILogger)
        assert calls == [1]

    def test_unregistered(self):
        container = ServiceContainer()
        assert container.try_resolve(ILogger) is None
        with pytest.raises(KeyError):
            container.resolve(ILogger)

    def test_no_sessions_registered(self):
        assert ServiceContainer().list_plan_sessions() == []
