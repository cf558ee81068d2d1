#!/usr/bin/env python3
"""
Database Reset Script
Reset the database structure

Features:
1. Drop Tables - drop every table known to the ORM metadata
2. Create Tables - recreate the latest schema from the models

Notes:
- This script only resets database structure, does not seed data
- To seed sample data, run `python script/seed_data.py`
"""

import asyncio
import sys

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engines,
    drop_db_and_tables,
)


async def main() -> None:
    print('🔄 Starting database reset...')
    print('=' * 50)
    print(f'Database URL: {settings.DATABASE_URL_ASYNC.split("@")[-1]}')

    try:
        print('🗑️ Dropping tables...')
        await drop_db_and_tables()

        print('🏗️ Creating tables...')
        await create_db_and_tables()

        print('=' * 50)
        print('✅ Database reset completed!')
        print('💡 To seed sample data, run: python script/seed_data.py')

    except Exception as e:
        print(f'❌ Reset failed: {e}')
        sys.exit(1)

    finally:
        await dispose_engines()


if __name__ == '__main__':
    asyncio.run(main())
