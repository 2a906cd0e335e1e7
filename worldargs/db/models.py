"""SQLAlchemy ORM models for sandbox persistence."""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all database models."""


class WorldModel(Base):
    """ORM model for sandbox worlds."""

    __tablename__ = "worlds"

    name: Mapped[str] = mapped_column(String, primary_key=True)
    uid: Mapped[str] = mapped_column(String(36), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    blocks: Mapped[list["BlockModel"]] = relationship(
        "BlockModel",
        back_populates="world",
        cascade="all, delete-orphan",
    )
    entities: Mapped[list["EntityModel"]] = relationship(
        "EntityModel",
        back_populates="world",
        cascade="all, delete-orphan",
    )


class BlockModel(Base):
    """ORM model for placed (non-air) blocks."""

    __tablename__ = "blocks"
    __table_args__ = (UniqueConstraint("world_name", "x", "y", "z"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    world_name: Mapped[str] = mapped_column(
        String, ForeignKey("worlds.name", ondelete="CASCADE"), nullable=False
    )
    x: Mapped[int] = mapped_column(Integer, nullable=False)
    y: Mapped[int] = mapped_column(Integer, nullable=False)
    z: Mapped[int] = mapped_column(Integer, nullable=False)
    material: Mapped[str] = mapped_column(String, nullable=False)

    world: Mapped["WorldModel"] = relationship("WorldModel", back_populates="blocks")


class EntityModel(Base):
    """ORM model for sandbox entities."""

    __tablename__ = "entities"

    unique_id: Mapped[str] = mapped_column(String(36), primary_key=True)
    world_name: Mapped[str] = mapped_column(
        String, ForeignKey("worlds.name", ondelete="CASCADE"), nullable=False
    )
    entity_type: Mapped[str] = mapped_column(String, nullable=False)
    x: Mapped[float] = mapped_column(Float, nullable=False)
    y: Mapped[float] = mapped_column(Float, nullable=False)
    z: Mapped[float] = mapped_column(Float, nullable=False)
    yaw: Mapped[float] = mapped_column(Float, default=0.0)
    pitch: Mapped[float] = mapped_column(Float, default=0.0)
    alive: Mapped[bool] = mapped_column(Boolean, default=True)

    # HumanEntity 전용
    held_material: Mapped[str | None] = mapped_column(String, nullable=True)
    held_amount: Mapped[int] = mapped_column(Integer, default=1)

    world: Mapped["WorldModel"] = relationship("WorldModel", back_populates="entities")
