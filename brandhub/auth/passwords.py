import bcrypt

from brandhub.core import config

# bcrypt only reads the first 72 bytes of a password.
MAX_PASSWORD_BYTES = 72


def _password_bytes(plain: str) -> bytes:
    return plain.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(plain: str, rounds: int | None = None) -> str:
    if rounds is None:
        rounds = config.BCRYPT_ROUNDS
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(plain), salt).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(plain), hashed.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False
