"""wetlands, sensor readings and users

Revision ID: 0001_initial
Revises:
Create Date: 2024-12-19 10:30:00

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None

id_type = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "wetlands",
        sa.Column("id", id_type, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("area", sa.Float(), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("sensors", sa.JSON(), nullable=False),
        sa.Column("last_updated", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_wetlands_id", "wetlands", ["id"])
    op.create_index("ix_wetlands_name", "wetlands", ["name"])

    op.create_table(
        "sensor_readings",
        sa.Column("id", id_type, primary_key=True, autoincrement=True),
        sa.Column(
            "wetland_id",
            id_type,
            sa.ForeignKey("wetlands.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("sensor_type", sa.String(30), nullable=False),
        sa.Column("value", sa.Float(), nullable=False),
        sa.Column("unit", sa.String(10), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
        sa.Column("status", sa.String(10), nullable=False),
    )
    op.create_index("ix_sensor_readings_id", "sensor_readings", ["id"])
    op.create_index("ix_sensor_readings_wetland_id", "sensor_readings", ["wetland_id"])
    op.create_index("ix_sensor_readings_timestamp", "sensor_readings", ["timestamp"])
    op.create_index("idx_sensor_readings_wetland_time", "sensor_readings", ["wetland_id", "timestamp"])

    op.create_table(
        "users",
        sa.Column("id", id_type, primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("organization", sa.String(255), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("status", sa.String(10), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("last_login", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)


def downgrade() -> None:
    op.drop_table("users")
    op.drop_table("sensor_readings")
    op.drop_table("wetlands")
