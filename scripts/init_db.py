#!/usr/bin/env python3
"""
Database initialization script
Creates the tables and, with --seed, fills them with sample data.

    python -m scripts.init_db [--drop] [--seed]
"""
import argparse
import logging
import sys

from sqlalchemy import text

from app.config import get_settings
from app.database import Base, SessionLocal, engine
from app.seed import seed_database
import app.models  # noqa: F401

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def check_database_connection() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        logger.error(f"Database URL: {get_settings().database_url}")
        return False


def main():
    parser = argparse.ArgumentParser(description="Initialize the apartment listings database")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    parser.add_argument("--seed", action="store_true", help="insert sample data")
    args = parser.parse_args()

    if not check_database_connection():
        sys.exit(1)

    if args.drop:
        logger.warning("Dropping existing tables")
        Base.metadata.drop_all(bind=engine)

    Base.metadata.create_all(bind=engine)
    logger.info("Tables created")

    if args.seed:
        db = SessionLocal()
        try:
            seed_database(db)
        finally:
            db.close()


if __name__ == "__main__":
    main()
