"""Create users and measures tables

Revision ID: 001_create_users_and_measures
Revises:

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001_create_users_and_measures"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=False),
        sa.Column("zip_code", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password", sa.String(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=False)

    op.create_table(
        "measures",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("measurement_date", sa.DateTime(), nullable=False),
        sa.Column("weight_kg", sa.Float(), nullable=False),
        sa.Column("height_cm", sa.Float(), nullable=False),
        sa.Column("waist_cm", sa.Float(), nullable=True),
        sa.Column("hip_cm", sa.Float(), nullable=True),
        sa.Column("chest_cm", sa.Float(), nullable=True),
        sa.Column("arm_right_cm", sa.Float(), nullable=True),
        sa.Column("arm_left_cm", sa.Float(), nullable=True),
        sa.Column("thigh_right_cm", sa.Float(), nullable=True),
        sa.Column("thigh_left_cm", sa.Float(), nullable=True),
        sa.Column("body_fat_percentage", sa.Float(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_measures_user_id"), "measures", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_measures_measurement_date"),
        "measures",
        ["measurement_date"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_measures_measurement_date"), table_name="measures")
    op.drop_index(op.f("ix_measures_user_id"), table_name="measures")
    op.drop_table("measures")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
