"""
Database Reset Script
Drops all tables, rebuilds the schema and loads the sample data
(tariff grid, pools, clients, shipments).
"""

import asyncio
import sys
sys.path.append('src')

from infrastructure.config import get_logger, get_settings, setup_logger
from infrastructure.database import models  # noqa: F401
from infrastructure.database.session import Base, close_db, engine, get_session
from presentation.api.v1.dependencies import build_init_db_use_case

logger = get_logger(__name__)


async def reset_database(seed: bool = True):
    """Drop all tables, recreate them and optionally seed them."""
    try:
        logger.info("Dropping all tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("All tables dropped")
        
        logger.info("Creating fresh tables...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        
        if seed:
            async for session in get_session():
                await build_init_db_use_case(session).execute()
        logger.info("Fresh database ready!")
        
    except Exception as e:
        logger.error(f"Reset failed: {e}")
        raise
    finally:
        await close_db()

if __name__ == "__main__":
    settings = get_settings()
    setup_logger(level=settings.log_level, log_format="text")
    
    print("\nWARNING: This will DELETE ALL DATA in the database!\n")
    response = input("Are you sure? Type 'yes' to continue: ")
    
    if response.lower() == 'yes':
        asyncio.run(reset_database(seed="--no-seed" not in sys.argv))
        print("\nDatabase has been reset successfully!\n")
    else:
        print("\nCancelled.\n")
