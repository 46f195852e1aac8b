from santa.db.migrate import upgrade_schema
from santa.db.models import Assignment, Base, Edge, Member
from santa.db.session import SessionLocal, get_session, init_engine

__all__ = [
    "Assignment",
    "Base",
    "Edge",
    "Member",
    "SessionLocal",
    "get_session",
    "init_engine",
    "upgrade_schema",
]
