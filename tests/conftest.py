"""
Fixtures pytest partagees pour les tests du catalogue.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Repository de categories vide
- Categories types
"""

from datetime import datetime
from pathlib import Path

import pytest

from src.config import Settings
from src.core.entities import Category
from src.core.value_objects import Uuid
from src.infrastructure.persistence import CategoryInMemoryRepository


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le fichier de log de chaque test.
    """
    return Settings(
        log_level="DEBUG",
        log_file=tmp_path / "logs" / "test.log",
    )


@pytest.fixture
def category_repository() -> CategoryInMemoryRepository:
    """Repository de categories vide."""
    return CategoryInMemoryRepository()


@pytest.fixture
def movie_category() -> Category:
    """Categorie 'Film' avec identifiant et date fixes."""
    return Category(
        category_id=Uuid("ea7673a4-39d0-47a7-bedb-3318671a6d6c"),
        name="Film",
        description="Longs metrages",
        is_active=True,
        created_at=datetime(2021, 1, 1),
    )


@pytest.fixture
def documentary_category() -> Category:
    """Categorie 'Documentaire' inactive."""
    return Category(
        category_id=Uuid("550e8400-e29b-41d4-a716-446655440000"),
        name="Documentaire",
        is_active=False,
        created_at=datetime(2022, 6, 15),
    )
