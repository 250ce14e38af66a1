"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les futures interfaces
(controleurs HTTP, taches). Les repositories sont des singletons : le
stockage en memoire doit etre partage par tous les consommateurs.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.repositories import CategoryInMemoryRepository
from .logging_config import configure_logging


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.logging.init()  # Configure loguru une fois
        repository = container.category_repository()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Logging - Resource pour initialisation unique
    logging = providers.Resource(
        configure_logging,
        log_level=config.provided.log_level,
        log_file=config.provided.log_file,
        rotation_size=config.provided.log_rotation_size,
        retention_count=config.provided.log_retention_count,
    )

    # Repositories - une seule collection en memoire par container
    category_repository = providers.Singleton(CategoryInMemoryRepository)
