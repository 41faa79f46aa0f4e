"""
Plant Catalog Backend - Startup Seed Data
==========================================

What:  The baseline plant list and the loader that inserts it at startup.
When:  Once, from the application lifespan, after the schema exists and
       before the server starts accepting requests.

Names are already upper-case: the seed path writes records as given and does
not apply the create-path normalization.
"""

import logging
from typing import Any, Dict, List, Optional

from plant_catalog.exceptions import StoreError
from plant_catalog.services.plant_store import PlantStore

logger = logging.getLogger(__name__)


SEED_PLANTS: List[Dict[str, Any]] = [
    {"name": "MONSTERA", "type": "Tropical", "price": 35, "family": "Araceae"},
    {"name": "FIDDLE LEAF FIG", "type": "Tree", "price": 60, "family": "Moraceae"},
    {"name": "SNAKE PLANT", "type": "Succulent", "price": 20, "family": "Asparagaceae"},
    {"name": "POTHOS", "type": "Vine", "price": 15, "family": "Araceae"},
    {"name": "PEACE LILY", "type": "Flower", "price": 25, "family": "Araceae"},
    {"name": "ALOE VERA", "type": "Succulent", "price": 12, "family": "Asphodelaceae"},
    {"name": "BOSTON FERN", "type": "Fern", "price": 18, "family": "Nephrolepidaceae"},
    {"name": "LAVENDER", "type": "Herb", "price": 10, "family": "Lamiaceae"},
]


async def load_initial_plants(
    store: PlantStore, plants: Optional[List[Dict[str, Any]]] = None
) -> int:
    """
    Insert the seed list, tolerating records that already exist.

    Never raises: a non-duplicate failure is logged and startup continues.

    Returns:
        Number of records inserted by this run (0 when all were present or
        seeding failed).
    """
    if plants is None:
        plants = SEED_PLANTS

    try:
        inserted = await store.bulk_seed(plants)
    except StoreError as e:
        logger.error("Seeding initial plants failed: %s | Context: %s", e.message, e.context)
        return 0

    if inserted:
        logger.info("Seeded %d initial plant(s)", inserted)
    else:
        logger.info("Initial plants already present; nothing to seed")
    return inserted
