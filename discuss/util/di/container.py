"""Dependency injection container."""

from collections.abc import Iterable

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from discuss.util.di import PROVIDERS, Component, get_provider


def mockable_components() -> set[Component]:
    """Names of the components that ship a mock implementation."""
    return {
        base.__mock_component__
        for base in PROVIDERS
        if base.__mock_component__ and base.__subclasses__()
    }


def create_container(mocked: Iterable[Component] = ()) -> AsyncContainer:
    """Build the container.

    Production passes nothing, so every component (PostgreSQL persistence
    included) uses its real implementation. Tests name the components to
    swap for their in-memory mocks.

    Args:
        mocked: Components to build from their mock implementation

    Returns:
        Configured DI container, including the FastAPI request provider
    """
    mocked = set(mocked)
    provider_instances = [
        get_provider(base, use_mock=base.__mock_component__ in mocked)()
        for base in PROVIDERS
    ]
    logfire.info(
        "DI container built",
        providers=[type(p).__name__ for p in provider_instances],
        mocked=sorted(mocked),
    )
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app, container: AsyncContainer) -> None:
    """Attach the container to the FastAPI app.

    Routes declared with DishkaRoute resolve FromDishka parameters from it.
    """
    setup_dishka(container, app)
