"""Initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-01-01 00:00:00
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "members",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("family_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_members_family_id", "members", ["family_id"])

    op.create_table(
        "edges",
        sa.Column("edge_id", sa.Integer(), primary_key=True),
        sa.Column("member_id", sa.Integer(), nullable=False),
        sa.Column(
            "type",
            sa.Enum("immediate_family", "extended_family", name="relation_type"),
            nullable=False,
        ),
        sa.Column("target_member_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["target_member_id"], ["members.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_edges_member_id", "edges", ["member_id"])

    op.create_table(
        "assignments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("assignment_year", sa.Integer(), nullable=False),
        sa.Column("giver_id", sa.Integer(), nullable=False),
        sa.Column("receiver_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["giver_id"], ["members.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["receiver_id"], ["members.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_assignments_assignment_year", "assignments", ["assignment_year"])


def downgrade() -> None:
    op.drop_index("ix_assignments_assignment_year", table_name="assignments")
    op.drop_table("assignments")
    op.drop_index("ix_edges_member_id", table_name="edges")
    op.drop_table("edges")
    op.drop_index("ix_members_family_id", table_name="members")
    op.drop_table("members")
    sa.Enum(name="relation_type").drop(op.get_bind(), checkfirst=True)
