from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from nav.core.config import settings
from nav.core.errors import StoreError
import logging

logger = logging.getLogger(__name__)

# SQLite (tests, dev local): la session est partagée entre threads par FastAPI
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, echo=False, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """Dépendance sessionDB"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

@contextmanager
def transaction(db: Session, action: str):
    """
    Commit à la sortie du bloc, rollback sur toute exception.

    Les erreurs SQLAlchemy remontent en StoreError (pas de retry),
    les erreurs métier (NotFoundError...) remontent telles quelles.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to {action}: {e}")
        raise StoreError(f"Failed to {action}") from e
    except Exception:
        db.rollback()
        raise
