from agri_edu.db.session import Database, get_db
from agri_edu.db.base import Base

__all__ = ["Database", "get_db", "Base"]
