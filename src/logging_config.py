"""
Configuration du logging du catalogue via loguru.

Les modules du domaine journalisent en DEBUG (création de catégories,
opérations de repository). Deux sorties :
- stderr : niveau configurable, avec le composant émetteur
- fichier optionnel : JSON, limité aux logs du package src, avec rotation
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

COMPONENT = "catalog"

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[component]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/catalog.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure les sorties de log.

    Args :
        log_level : Niveau minimum sur stderr
        log_file : Fichier JSON des logs du domaine, None pour ne pas en écrire
        rotation_size : Taille avant rotation du fichier (ex: "10 MB")
        retention_count : Nombre de fichiers archivés conservés
    """
    logger.remove()
    logger.configure(extra={"component": COMPONENT})

    logger.add(sys.stderr, level=log_level, format=_CONSOLE_FORMAT, colorize=True)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    # Appels synchrones : le noyau s'exécute sur une seule boucle asyncio
    logger.add(
        log_file,
        level="DEBUG",
        filter="src",
        serialize=True,
        diagnose=False,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
    )

    logger.debug("Logging configuré", log_file=str(log_file), level=log_level)
