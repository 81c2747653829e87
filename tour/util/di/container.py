"""Production container and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
import logfire

from tour.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container wired with the production component of every provider.

    The container owns app-scoped resources (the database engine and the
    rate limiter with its sweep thread), so whoever creates it must close it.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    logfire.debug(
        "DI container created", providers=[type(p).__name__ for p in providers]
    )
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app``.

    Routes resolve dependencies through ``DishkaRoute``; the application
    lifespan closes the container on shutdown.
    """
    setup_dishka(container, app)
