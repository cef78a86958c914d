from .models import Base, StorageItem, User, UserRole, Chamber, ChamberOption, CouncilMember
from .database import init_database, init_db, reset_db, close_database, get_session
from .storage import LocalStorage, MemoryStorage, DatabaseStorage
from .crud import UserStore, ChamberStore, USERS_STORAGE_KEY, CHAMBERS_STORAGE_KEY
from .security import hash_password, verify_password

__all__ = [
    "Base",
    "StorageItem",
    "User",
    "UserRole",
    "Chamber",
    "ChamberOption",
    "CouncilMember",
    "init_database",
    "init_db",
    "reset_db",
    "close_database",
    "get_session",
    "LocalStorage",
    "MemoryStorage",
    "DatabaseStorage",
    "UserStore",
    "ChamberStore",
    "USERS_STORAGE_KEY",
    "CHAMBERS_STORAGE_KEY",
    "hash_password",
    "verify_password",
]
