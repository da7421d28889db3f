# scripts/setup_database.py
#!/usr/bin/env python
"""
Create the mood journal tables on a fresh database.

Prefer `alembic upgrade head` for databases that will be migrated later;
this is the quick path for local SQLite or throwaway PostgreSQL instances.
"""
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent.parent))

from moodjournal.core.database import engine, Base
import moodjournal.db.models  # registers mood_entries on Base.metadata
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def main():
    """Create all tables defined in moodjournal.db.models"""
    try:
        logger.info(f"Creating database tables on {engine.url.render_as_string(hide_password=True)}...")
        Base.metadata.create_all(bind=engine)
        logger.info("\n✅ Database setup complete!")
        logger.info("You can now start the application with: uvicorn moodjournal.main:app --reload")

    except Exception as e:
        logger.error(f"❌ Error setting up database: {str(e)}")
        sys.exit(1)

if __name__ == "__main__":
    main()
