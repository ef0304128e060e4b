from __future__ import annotations

import os
from contextlib import contextmanager
from collections.abc import Generator

from sqlalchemy.orm import Session

from app.grimoire.db import build_engine, build_sessionmaker


def resolve_database_url(database_url: str | None = None) -> str:
    return (database_url or os.environ.get("DATABASE_URL") or "sqlite:///grimoire.db").strip()


@contextmanager
def script_session(db_url: str) -> Generator[Session, None, None]:
    """Commit-or-rollback session on a throwaway engine, for one-off scripts."""
    engine = build_engine(db_url)
    s: Session = build_sessionmaker(engine)()
    try:
        yield s
        s.commit()
    except Exception:
        s.rollback()
        raise
    finally:
        s.close()
        engine.dispose()
