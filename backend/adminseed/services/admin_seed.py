import logging

from sqlalchemy import delete
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Connection

from adminseed.core.security import hash_password
from adminseed.models.user import User
from adminseed.schemas.user import ADMIN_ROLE, AdminProfile

log = logging.getLogger(__name__)

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _clean(v: str | None) -> str | None:
    if v is None:
        return None
    v = str(v).strip()
    return v or None


def _insert_for(bind: Connection):
    name = bind.dialect.name
    try:
        return _INSERTS[name]
    except KeyError:
        raise RuntimeError(f"unsupported database dialect for admin seeding: {name}") from None


def seed_admin(
    bind: Connection,
    email: str | None,
    password: str | None,
    profile: AdminProfile | None = None,
    rounds: int | None = None,
) -> bool:
    """Create the administrator row unless it already exists.

    Returns True when a row was inserted. Missing credentials skip the
    seed entirely; an existing row with the same email is left untouched.
    The password is hashed exactly as given, surrounding spaces included.
    """
    email = _clean(email)
    if not email or not _clean(password):
        log.info("ADMIN_EMAIL or ADMIN_PASSWORD not set, skipping admin user creation")
        return False

    profile = profile or AdminProfile()
    password_hash = hash_password(password, rounds=rounds)

    insert = _insert_for(bind)
    stmt = (
        insert(User.__table__)
        .values(
            email=email,
            names=profile.names,
            lastnames=profile.lastnames,
            birthdate=profile.birthdate,
            phoneCode=profile.phoneCode,
            phoneNumber=profile.phoneNumber,
            password=password_hash,
            role=ADMIN_ROLE,
        )
        .on_conflict_do_nothing(index_elements=["email"])
    )
    created = bind.execute(stmt).rowcount == 1
    if created:
        log.info("created admin user %s", email)
    else:
        log.info("admin user %s already exists, leaving it unchanged", email)
    return created


def remove_admin(bind: Connection, email: str | None) -> int:
    """Delete the seeded administrator if it still carries the admin role."""
    email = _clean(email)
    if not email:
        log.info("ADMIN_EMAIL not set, skipping admin user removal")
        return 0

    t = User.__table__
    stmt = delete(t).where(t.c.email == email, t.c.role == ADMIN_ROLE)
    removed = bind.execute(stmt).rowcount
    log.info("removed %d admin user row(s) for %s", removed, email)
    return removed
