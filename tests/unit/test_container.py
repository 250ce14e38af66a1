"""
Tests pour le container d'injection de dependances.
"""

import pytest
from dependency_injector import providers
from loguru import logger

from src.container import Container
from src.core.entities import Category
from src.infrastructure.persistence import CategoryInMemoryRepository


@pytest.fixture
def container(test_settings):
    container = Container()
    container.config.override(providers.Object(test_settings))
    yield container
    container.shutdown_resources()
    logger.remove()


class TestContainer:
    def test_category_repository_is_shared(self, container) -> None:
        first = container.category_repository()
        second = container.category_repository()

        assert isinstance(first, CategoryInMemoryRepository)
        assert first is second

    @pytest.mark.asyncio
    async def test_repository_state_visible_to_all_consumers(self, container) -> None:
        category = Category.create(name="Film")
        await container.category_repository().insert(category)

        assert await container.category_repository().find_by_id(category.category_id) is category

    def test_logging_resource_uses_settings(self, container, test_settings) -> None:
        container.logging.init()

        assert test_settings.log_file.exists()
