"""Production DI container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from replicator.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with every component's real implementation.

    ``FastapiProvider`` makes the current ``Request`` resolvable inside the
    REQUEST scope opened for each HTTP call.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app so routes can use ``FromDishka``."""
    setup_dishka(container, app)
