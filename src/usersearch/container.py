"""Dependency injection container for the user search service."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import (
    CompositeRanker,
    FieldMatcher,
    PassThroughPrefilter,
    RankerConfig,
    SearchPager,
    SearchQuery,
    SimilarityConfig,
    SimilarityScorer,
)
from .schemas.config import load_config
from .store import InMemoryUserStore


class SearchContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    store = providers.Singleton(InMemoryUserStore)

    scorer = providers.Singleton(SimilarityScorer)
    matcher = providers.Singleton(FieldMatcher, scorer=scorer)
    ranker = providers.Singleton(CompositeRanker, matcher=matcher)
    pager = providers.Singleton(SearchPager)
    prefilter = providers.Singleton(PassThroughPrefilter)

    search = providers.Factory(
        SearchQuery,
        source=store,
        ranker=ranker,
        pager=pager,
        prefilter=prefilter,
    )


def create_container(
    *,
    settings: dict | None = None,
    store: InMemoryUserStore | None = None,
) -> SearchContainer:
    """Instantiate container with optional overrides."""

    container = SearchContainer()

    if store is not None:
        container.store.override(providers.Object(store))

    if not settings:
        return container

    # Validate before touching providers so a bad file changes nothing.
    settings = load_config(settings).to_settings()
    container.config.from_dict(settings)

    if "scorer" in settings:
        scorer_config = SimilarityConfig(**settings["scorer"])
        container.scorer.override(
            providers.Singleton(SimilarityScorer, config=scorer_config)
        )

    if "ranker" in settings:
        ranker_config = RankerConfig(**settings["ranker"])
        container.ranker.override(
            providers.Singleton(
                CompositeRanker,
                matcher=container.matcher,
                config=ranker_config,
            )
        )

    if "search" in settings:
        container.pager.override(
            providers.Singleton(
                SearchPager,
                max_count=settings["search"]["max_count"],
            )
        )

    return container
