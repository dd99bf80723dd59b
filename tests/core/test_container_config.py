from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from usersearch.config import ConfigManager
from usersearch.container import create_container
from usersearch.schemas.config import AppConfig, load_config
from usersearch.store import InMemoryUserStore


def test_create_container_defaults():
    container = create_container()

    assert container.scorer().prefix_weight == 0.1
    assert container.pager().max_count == 25
    assert container.ranker()._config.selection == "sort"
    assert container.search() is not container.search()
    assert container.search()._source is container.store()


def test_create_container_with_overrides():
    container = create_container(
        settings={
            "search": {"max_count": 10, "default_count": 5},
            "scorer": {"prefix_weight": 0.2},
            "ranker": {"selection": "heap"},
        }
    )

    scorer = container.scorer()
    ranker = container.ranker()
    pager = container.pager()

    assert scorer.prefix_weight == 0.2
    assert ranker._config.selection == "heap"
    assert ranker._matcher is container.matcher()
    assert pager.max_count == 10
    assert container.config.search.default_count() == 5


def test_create_container_uses_supplied_store():
    store = InMemoryUserStore()
    store.create({"given_name": "Esau", "family_name": "Crump", "email_address": "e@x.com"})

    container = create_container(store=store)
    page = container.search().search(given_name="esau")

    assert [user.given_name for user in page] == ["Esau"]


@pytest.mark.parametrize(
    "settings",
    [
        {"search": {"max_count": 26}},
        {"search": {"max_count": 5, "default_count": 10}},
        {"scorer": {"prefix_weight": 0.5}},
        {"ranker": {"selection": "random"}},
        {"unknown": {}},
    ],
)
def test_create_container_rejects_invalid_settings(settings):
    with pytest.raises(ValidationError):
        create_container(settings=settings)


def test_load_config_validation():
    data = {
        "search": {"default_count": 10},
        "ranker": {"selection": "heap"},
    }
    app_config = load_config(data)
    assert isinstance(app_config, AppConfig)
    settings = app_config.to_settings()
    assert settings["search"] == {"max_count": 25, "default_count": 10}
    assert settings["ranker"]["selection"] == "heap"
    assert "scorer" not in settings


def test_load_config_rejects_non_mapping():
    with pytest.raises(ValidationError):
        load_config(["search"])
    assert load_config(None).to_settings() == {}


def test_config_manager_loads_yaml_by_name(tmp_path: Path):
    (tmp_path / "search.yaml").write_text("ranker:\n  selection: heap\n", encoding="utf-8")
    (tmp_path / "empty.yml").write_text("", encoding="utf-8")
    (tmp_path / "list.yaml").write_text("- 1\n- 2\n", encoding="utf-8")
    manager = ConfigManager(tmp_path)

    assert manager.load("search") == {"ranker": {"selection": "heap"}}
    assert manager.load("search.yaml") == manager.load("search")
    assert manager.load("empty.yml") == {}
    with pytest.raises(ValueError):
        manager.load("list")


def test_lowering_max_count_alone_is_accepted():
    container = create_container(settings={"search": {"max_count": 10}})

    assert container.pager().max_count == 10
    assert container.config.search.default_count() is None
    assert load_config({"search": {"max_count": 10}}).to_settings() == {
        "search": {"max_count": 10}
    }
