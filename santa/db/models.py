from __future__ import annotations

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

from santa.services.records import RelationType

Base = declarative_base()


class Member(Base):
    __tablename__ = "members"

    id = Column(Integer, primary_key=True)
    family_id = Column(Integer, nullable=False, index=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    relations = relationship(
        "Edge",
        foreign_keys="Edge.member_id",
        back_populates="member",
        cascade="all, delete-orphan",
        order_by="Edge.edge_id",
    )

    def __repr__(self) -> str:
        return f"<Member(id={self.id}, family_id={self.family_id}, name={self.name})>"


class Edge(Base):
    __tablename__ = "edges"

    edge_id = Column(Integer, primary_key=True)
    member_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(
        Enum(RelationType, name="relation_type", values_callable=lambda kinds: [kind.value for kind in kinds]),
        nullable=False,
    )
    target_member_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False)

    member = relationship("Member", foreign_keys=[member_id], back_populates="relations")

    def __repr__(self) -> str:
        return (
            "<Edge(edge_id={0}, member_id={1}, type={2}, target_member_id={3})>"
        ).format(self.edge_id, self.member_id, self.type, self.target_member_id)


class Assignment(Base):
    __tablename__ = "assignments"

    id = Column(Integer, primary_key=True)
    assignment_year = Column(Integer, nullable=False, index=True)
    giver_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False)
    receiver_id = Column(Integer, ForeignKey("members.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    giver = relationship("Member", foreign_keys=[giver_id])
    receiver = relationship("Member", foreign_keys=[receiver_id])
