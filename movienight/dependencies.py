import logging
from typing import Optional

import asyncpg

from .config import settings

logger = logging.getLogger(__name__)

# Global state for connections
class AppState:
    pg_pool: Optional[asyncpg.Pool] = None

state = AppState()

async def init_resources():
    """Open the catalog store connection pool"""
    state.pg_pool = await asyncpg.create_pool(
        settings.DATABASE_URL,
        min_size=settings.DB_POOL_MIN_SIZE,
        max_size=settings.DB_POOL_MAX_SIZE,
        command_timeout=settings.DB_COMMAND_TIMEOUT
    )
    logger.info("Catalog store pool initialized")

async def close_resources():
    """Close the catalog store connection pool"""
    if state.pg_pool:
        await state.pg_pool.close()
        state.pg_pool = None
        logger.info("Catalog store pool closed")

# Dependencies
async def get_db_pool() -> asyncpg.Pool:
    return state.pg_pool
