"""create suppliers, destinations and fletes tables

Revision ID: 3b9e0c1d2a47
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3b9e0c1d2a47"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "suppliers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "destinations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=True),
        sa.Column("cost", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "fletes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("supplier_id", sa.Integer(), nullable=True),
        sa.Column("destination_id", sa.Integer(), nullable=True),
        sa.Column("highway_expense_cost", sa.Integer(), nullable=True),
        sa.Column("cost_of_stay", sa.Integer(), nullable=True),
        sa.Column("registration_date", sa.DateTime(), nullable=True),
        sa.Column("trip_number", sa.Integer(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(),
            nullable=True,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default=sa.text("1")),
        sa.ForeignKeyConstraint(["supplier_id"], ["suppliers.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["destination_id"], ["destinations.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_fletes_registration_date", "fletes", ["registration_date"])
    op.create_index("idx_fletes_supplier", "fletes", ["supplier_id"])
    op.create_index("idx_fletes_destination", "fletes", ["destination_id"])


def downgrade() -> None:
    op.drop_index("idx_fletes_destination", table_name="fletes")
    op.drop_index("idx_fletes_supplier", table_name="fletes")
    op.drop_index("idx_fletes_registration_date", table_name="fletes")
    op.drop_table("fletes")
    op.drop_table("destinations")
    op.drop_table("suppliers")
