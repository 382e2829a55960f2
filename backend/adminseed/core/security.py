from passlib.context import CryptContext

from adminseed.core.config import settings

pwd = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.bcrypt_rounds)

def _truncate(p: str) -> str:
    p = str(p)
    b = p.encode("utf-8")
    if len(b) > 72:
        p = b[:72].decode("utf-8", errors="ignore")
    return p

def hash_password(p: str, rounds: int | None = None) -> str:
    if p is None:
        raise ValueError("password is required")
    if rounds is None:
        return pwd.hash(_truncate(p))
    return pwd.using(bcrypt__rounds=rounds).hash(_truncate(p))

def verify_password(p: str, hashed: str) -> bool:
    if p is None or hashed is None:
        return False
    return pwd.verify(_truncate(p), hashed)
