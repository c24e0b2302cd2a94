import bcrypt


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    salt = bcrypt.gensalt(rounds=12)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against a stored bcrypt hash."""
    if not (hashed.startswith("$2b$") or hashed.startswith("$2a$")):
        return False
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
