# morph_adapter\shared\container.py
from dependency_injector import containers, providers

from morph_adapter.shared.config import settings
from morph_adapter.adapters.tufts.adapter import TuftsAdapter
from morph_adapter.core.use_cases.lookup_homonym import LookupHomonym

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Assembles the morphology service client and the lookup use case.
    """

    # 1. Configuration
    # Wrapping the settings allows overriding in tests.
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)

    # Morphology Service (Singleton: mapping tables and config are read once)
    morphology_service = providers.Singleton(
        TuftsAdapter,
        config=config.MORPH_CONFIG_PATH,
    )

    # 3. Use Cases (Application Logic)

    # Factory: New instance per lookup, sharing the service.
    lookup_homonym_use_case = providers.Factory(
        LookupHomonym,
        service=morphology_service,
    )

# Instantiate the container for global access (e.g. by the CLI)
container = Container()
