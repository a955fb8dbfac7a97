from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from core.environment.providers import EnvironmentProvider
from blockchain.providers import BlockchainProvider
from core.logging.providers import LoggerProvider


def create_container(*overrides: Provider) -> AsyncContainer:
    """
    Build the application container.

    Parameters
    ----------
    *overrides : Provider
        Extra providers registered last, replacing earlier registrations

    Returns
    -------
    AsyncContainer
        Dishka container
    """
    return make_async_container(
        FastapiProvider(),
        EnvironmentProvider(),
        LoggerProvider(),
        BlockchainProvider(),
        *overrides
    )
