#!/usr/bin/env python3
"""Import the core (M20) Background catalogue.

Backgrounds that already exist (matched by name) are skipped, so the import is
safe to re-run.

Usage:
    python scripts/import_backgrounds.py            # Import
    python scripts/import_backgrounds.py --dry-run  # Report what would be created
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo root is on sys.path when running as a script
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.exc import SQLAlchemyError

from app.grimoire.modules.backgrounds.service import create_background, get_background_by_name
from scripts._db_utils import resolve_database_url, script_session

logger = logging.getLogger(__name__)


def _bg(name: str, subtype: str, cost: str, page: int, description: str) -> dict:
    return {
        "name": name,
        "category": None,
        "subtype": subtype,
        "cost": cost,
        "description": description,
        "pageRef": f"M20 p. {page}",
    }


BACKGROUNDS = [
    # General backgrounds, open to any character
    _bg("Allies", "general", "Variable", 303, "Friends, helpers or minor spirits who have your back. Each dot is one capable ally or two errand-runners."),
    _bg("Alternate Identity", "general", "Variable", 304, "A false identity, from a fake licence at one dot to a fully documented second life at five."),
    _bg("Backup", "general", "Variable", 306, "Expendable personnel your organization sends when you call. Elite agents cost double."),
    _bg("Certification", "general", "Variable", 308, "Official papers for regulated activity, from a business licence up to diplomatic immunity."),
    _bg("Contacts", "general", "Variable", 309, "People who know things and can dig up information or pull small strings. Can exceed five dots."),
    _bg("Fame", "general", "Variable", 313, "Renown in the Sleeper world, from a niche subculture to near-universal recognition."),
    _bg("Influence", "general", "Variable", 316, "Clout among the Sleepers. When you speak, people listen. Rates up to ten."),
    _bg("Library", "general", "Variable", 318, "An archive for researching Abilities and Spheres. Groups may pool their Libraries."),
    _bg("Resources", "general", "Variable", 322, "Cash and goods on hand, from living paycheck to paycheck up to owning governments."),
    _bg("Retainers", "general", "Variable", 323, "Loyal servants, employees or constructs. One retainer per dot."),
    _bg("Spies", "general", "Variable", 324, "Networks of informants who gather sensitive intelligence, at a price."),
    # Mage-specific backgrounds
    _bg("Avatar", "mage", "Variable", 304, "The strength of your connection to the Avatar that guides your Awakening."),
    _bg("Arcane", "mage", "Variable", 305, "Supernatural obscurity that makes you hard to notice, remember or track."),
    _bg("Chantry", "mage", "Variable", 308, "A shared stronghold with library, sanctum space and security. Shared among the group."),
    _bg("Cult", "mage", "Variable", 310, "Devoted followers who believe in your cause and expect guidance in return."),
    _bg("Destiny", "mage", "Variable", 311, "Fate has plans for you. Once per story add the rating to a single roll."),
    _bg("Dream", "mage", "Variable", 311, "Access to the Dream Realms, from vivid dreams to mastery of the oneiric."),
    _bg("Familiar", "mage", "Variable", 313, "A supernatural companion bound to you. Its death is traumatic."),
    _bg("Legend", "mage", "Variable", 317, "Your deeds are told among the Awakened, opening doors and drawing attention."),
    _bg("Mentor", "mage", "Variable", 318, "An elder who trains and guides you, with an agenda of their own."),
    _bg("Node", "mage", "Variable", 319, "A place of power that yields Quintessence and Tass. Rates up to ten."),
    _bg("Past Lives", "mage", "Variable", 320, "Memories of earlier incarnations that lend dice to Abilities you lack."),
    _bg("Patron", "mage", "Variable", 320, "A powerful, secretive benefactor who pulls strings on your behalf."),
    _bg("Rank", "mage", "Variable", 321, "A title among the masses: military, religious, corporate or civic."),
    _bg("Requisitions", "mage", "Variable", 321, "Access to your organization's supply of gear, vehicles and Procedures."),
    _bg("Sanctum / Laboratory", "mage", "Double Cost", 323, "A personal space where your paradigm holds and magick comes easier."),
    _bg("Secret Weapons", "mage", "Variable", 324, "Prototype Devices and experimental gear issued for field testing."),
    _bg("Status", "mage", "Variable", 325, "Standing within Awakened society and its political structures."),
    _bg("Totem", "mage", "Double Cost", 326, "A patron spirit that aids you in exchange for honoring its ways."),
    _bg("Wonder", "mage", "Variable", 328, "A magickal item such as a Talisman, Fetish or Device. Cost equals its power."),
]


def run_import(*, database_url: str | None = None, dry_run: bool = False) -> dict[str, int]:
    db_url = resolve_database_url(database_url)
    counts = {"created": 0, "skipped": 0, "errors": 0}

    with script_session(db_url) as s:
        for background in BACKGROUNDS:
            if get_background_by_name(s, background["name"]):
                print(f"  skip    {background['name']} (already exists)")
                counts["skipped"] += 1
                continue
            if dry_run:
                print(f"  create  {background['name']} (dry run)")
                counts["created"] += 1
                continue
            try:
                with s.begin_nested():
                    create_background(s, background)
            except SQLAlchemyError as e:
                logger.error("Failed to import background %s: %s", background["name"], e)
                counts["errors"] += 1
                continue
            print(f"  create  {background['name']}")
            counts["created"] += 1

        if dry_run:
            s.rollback()

    print()
    print("Import summary:")
    print(f"  Created: {counts['created']}")
    print(f"  Skipped: {counts['skipped']}")
    print(f"  Errors:  {counts['errors']}")
    print(f"  Total:   {len(BACKGROUNDS)}")
    return counts


def main() -> None:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    parser = argparse.ArgumentParser(description="Import the core Background catalogue.")
    parser.add_argument("--database-url", default=None, help="Overrides DATABASE_URL")
    parser.add_argument("--dry-run", action="store_true", help="Report only; write nothing")
    args = parser.parse_args()

    counts = run_import(database_url=args.database_url, dry_run=args.dry_run)
    if counts["errors"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
