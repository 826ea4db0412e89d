from report_it.database.connection import (
    engine,
    SessionLocal,
    Base
)
from report_it.database.session import (
    get_db,
    create_all_tables,
    drop_all_tables,
    ping_database,
    dispose_engine
)

__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "get_db",
    "create_all_tables",
    "drop_all_tables",
    "ping_database",
    "dispose_engine"
]
