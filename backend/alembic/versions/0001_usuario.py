from alembic import op
import sqlalchemy as sa

revision = "0001_usuario"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "Usuario",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("names", sa.String(length=128), nullable=False),
        sa.Column("lastnames", sa.String(length=128), nullable=False),
        sa.Column("birthdate", sa.Date(), nullable=False),
        sa.Column("phoneCode", sa.String(length=8), nullable=False),
        sa.Column("phoneNumber", sa.String(length=32), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=16), nullable=False, server_default="user"),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=True),
    )
    op.create_index("ix_Usuario_email", "Usuario", ["email"], unique=True)

def downgrade():
    op.drop_index("ix_Usuario_email", table_name="Usuario")
    op.drop_table("Usuario")
