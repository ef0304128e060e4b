"""
Create any missing tables and optionally load starter content.

Usage:
    python scripts/init_db.py                  # create tables only
    python scripts/init_db.py --seed-rotes     # also insert the sample rotes (only into an empty table)
    python scripts/init_db.py --backgrounds    # also import the core background catalogue
"""
import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.grimoire.db import build_engine
from app.grimoire.models import Base
from app.grimoire.modules.rotes.models import Rote
from app.grimoire.modules.rotes.service import seed_sample_rotes
from scripts._db_utils import resolve_database_url, script_session


def create_tables(db_url: str) -> None:
    engine = build_engine(db_url)
    try:
        Base.metadata.create_all(bind=engine)
    finally:
        engine.dispose()


def seed_only(*, database_url: str | None = None, seed_rotes: bool = False, backgrounds: bool = False) -> None:
    """
    Idempotent: sample rotes are only inserted into an empty table and
    backgrounds already present (by name) are skipped.
    """
    db_url = resolve_database_url(database_url)
    create_tables(db_url)
    print("Tables ensured.")

    if seed_rotes:
        with script_session(db_url) as s:
            if s.query(Rote).count():
                print("Rotes table not empty; skipping sample rotes.")
            else:
                created = seed_sample_rotes(s)
                print(f"Inserted {len(created)} sample rotes.")

    if backgrounds:
        from scripts import import_backgrounds

        import_backgrounds.run_import(database_url=db_url)


def main() -> None:
    load_dotenv()
    parser = argparse.ArgumentParser(description="Create tables and load starter content.")
    parser.add_argument("--database-url", default=None, help="Overrides DATABASE_URL")
    parser.add_argument("--seed-rotes", action="store_true", help="Insert sample rotes into an empty table")
    parser.add_argument("--backgrounds", action="store_true", help="Import the core background catalogue")
    args = parser.parse_args()
    seed_only(database_url=args.database_url, seed_rotes=args.seed_rotes, backgrounds=args.backgrounds)


if __name__ == "__main__":
    main()
