"""admin user

Revision ID: 0002_admin_user
Revises: 0001_usuario

Seeds the administrator from ADMIN_EMAIL / ADMIN_PASSWORD. Without both
variables the upgrade is a no-op. An existing row with the same email is
never overwritten. The password hash is computed at run time, so this
revision cannot be rendered offline (--sql) while credentials are set.
"""

from alembic import context, op

from adminseed.core.config import Settings
from adminseed.services.admin_seed import remove_admin, seed_admin

revision = "0002_admin_user"
down_revision = "0001_usuario"
branch_labels = None
depends_on = None


OFFLINE_ERROR = (
    "0002_admin_user needs a live database connection; run it without --sql "
    "or unset the ADMIN_* variables"
)


def _configured(*values):
    return all((v or "").strip() for v in values)


def upgrade():
    cfg = Settings()
    if context.is_offline_mode():
        if _configured(cfg.admin_email, cfg.admin_password):
            raise RuntimeError(OFFLINE_ERROR)
        return
    seed_admin(op.get_bind(), cfg.admin_email, cfg.admin_password, rounds=cfg.bcrypt_rounds)


def downgrade():
    cfg = Settings()
    if context.is_offline_mode():
        if _configured(cfg.admin_email):
            raise RuntimeError(OFFLINE_ERROR)
        return
    remove_admin(op.get_bind(), cfg.admin_email)
