"""ORM models exposed for metadata discovery."""
from app.db.models.user import User

__all__ = ["User"]
