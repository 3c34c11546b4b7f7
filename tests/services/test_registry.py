"""Tests for paramguard.services module."""

import threading

import pytest

from paramguard.rules import RuleSetBuilder
from paramguard.services import ServiceModel, ServiceRegistry, UnknownServiceError, default_registry
from paramguard.validator import MissingParam


@pytest.fixture
def registry():
    return ServiceRegistry()


def make_service(name, url, verb="get"):
    builder = RuleSetBuilder()
    builder.integer("id", required=True)
    return ServiceModel(name=name, url=url, verb=verb, rule_set=builder.build())


class TestServiceModel:
    def test_validate_params(self):
        service = make_service("show_user", "users/show")
        assert service.validate_params({"id": "4"}) == {"id": 4}
        with pytest.raises(MissingParam):
            service.validate_params({})

    def test_defaults(self):
        service = ServiceModel(name="ping", url="ping")
        assert service.verb == "get"
        assert service.rule_set.is_empty()
        assert service.validate_params(None) == {}

    def test_from_dict(self):
        service = ServiceModel.model_validate(
            {"name": "s", "url": "u", "params": {"required": [{"name": "id"}]}}
        )
        assert service.rule_set.param_names() == frozenset({"id"})


class TestServiceRegistry:
    def test_add_and_all(self, registry):
        first = make_service("a", "a")
        assert registry.add(first) == [first]
        assert registry.all() == [first]

    def test_same_url_and_verb_added_once(self, registry):
        registry.add(make_service("a", "items"))
        services = registry.add(make_service("b", "items"))
        assert [s.name for s in services] == ["a"]

    def test_same_url_other_verb(self, registry):
        registry.add(make_service("list", "items"))
        registry.add(make_service("create", "items", verb="post"))
        assert [s.name for s in registry.all()] == ["list", "create"]

    def test_named(self, registry):
        service = make_service("show", "show")
        registry.add(service)
        assert registry.named("show") is service

    def test_named_unknown(self, registry):
        with pytest.raises(UnknownServiceError, match="Service named nope isn't available"):
            registry.named("nope")

    def test_find_by_url(self, registry):
        service = make_service("show", "items/show")
        registry.add(service)
        assert registry.find_by_url("items/show") is service
        assert registry.find_by_url("items/other") is None

    def test_clear(self, registry):
        registry.add(make_service("a", "a"))
        registry.clear()
        assert registry.all() == []

    def test_all_returns_a_copy(self, registry):
        registry.add(make_service("a", "a"))
        registry.all().clear()
        assert len(registry.all()) == 1

    def test_concurrent_adds(self, registry):
        threads = [
            threading.Thread(target=registry.add, args=(make_service(f"s{i}", f"url{i % 10}"),))
            for i in range(50)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(registry.all()) == 10

    def test_default_registry(self):
        assert isinstance(default_registry, ServiceRegistry)
