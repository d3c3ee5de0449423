"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from replicator.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: set[Component] | None = None, with_fastapi: bool = False
) -> AsyncContainer:
    """Build a container where every component is faked unless unmocked.

    Args:
        unmock: Components that should use their production provider
            (``{"persistence"}`` needs PostgreSQL at DATABASE__URL)
        with_fastapi: Also register the request provider, for containers
            passed to ``create_app``

    Returns:
        Container ready to open a request scope

    Raises:
        ValueError: For unknown components, or when an unmocked component
            depends on one that is still faked

    Examples:
        build_test_container()                        # unit: all fakes
        build_test_container(unmock={"persistence"})  # integration
        build_test_container(with_fastapi=True)       # HTTP e2e
    """
    unmock = set(unmock or ())
    _check_unmock(unmock)

    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    if with_fastapi:
        providers.append(FastapiProvider())

    return make_async_container(*providers)


def _check_unmock(unmock: set[Component]) -> None:
    mockable = {
        base.__mock_component__: base
        for base in PROVIDERS
        if base.__mock_component__ is not None
    }

    unknown = unmock - set(mockable)
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    for component in unmock:
        missing = mockable[component].__depends_on__ - unmock
        if missing:
            raise ValueError(
                f"Component '{component}' requires {sorted(missing)} to be unmocked"
            )
