from attire.core.config import settings
from attire.core.database import get_db, Base, get_db_session
from attire.core.security import (
    verify_password,
    get_password_hash,
    create_session_token,
    decode_token,
)
