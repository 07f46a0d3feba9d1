# 📄 File: garden_planner/modules/garden_layout/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Defines how gardens, beds, plants, plantings, history and yearly archives are stored in
# the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the garden layout module. Every table is owner-scoped through an
# opaque owner_id (directly or via its bed). Uniqueness of (bed_id, x, y) and (owner_id, year)
# is enforced by the database as the backstop for concurrent writers.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - garden_planner.shared.config.database (DatabaseBase and naming convention)
#
# 🔄 Connected Modules / Calls From:
# - repository implementations in this package
# - Alembic migrations (metadata)
# - tests (metadata.create_all)

"""
SQLAlchemy Models for Garden Layout

Models:
- GardenModel: one garden grid per owner
- PlantModel: owner's plant catalog
- BedModel: beds, optionally positioned on the garden grid
- BedPlacementModel: plants in bed cells, unique per (bed_id, x, y)
- PlacementHistoryModel: archived placements per bed and season
- WalkwayModel / GateModel: garden-grid features
- GardenYearModel: yearly JSON snapshots, unique per (owner_id, year)

Timestamps use Python-side defaults so values are available right after flush
without a refresh round-trip on the async session.
"""

from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)

from garden_planner.shared.config.database import DatabaseBase


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# GARDEN
# =============================================================================

class GardenModel(DatabaseBase):
    """The owner's garden grid. One row per owner."""
    __tablename__ = "gardens"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(255), nullable=False, unique=True, comment="Opaque owner id")
    width_inches = Column(Integer, nullable=False)
    height_inches = Column(Integer, nullable=False)
    cell_inches = Column(Integer, nullable=False, default=12, comment="Garden grid pitch")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        CheckConstraint("width_inches > 0", name="width_positive"),
        CheckConstraint("height_inches > 0", name="height_positive"),
        CheckConstraint("cell_inches > 0", name="cell_positive"),
    )

    def __repr__(self) -> str:
        return f"<GardenModel(owner_id={self.owner_id}, {self.width_inches}x{self.height_inches}@{self.cell_inches})>"


# =============================================================================
# PLANTS
# =============================================================================

class PlantModel(DatabaseBase):
    __tablename__ = "plants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(255), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    spacing_inches = Column(Integer, nullable=False, default=12, comment="Minimum spacing between plants")
    days_to_maturity_min = Column(Integer, nullable=True)
    days_to_maturity_max = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        CheckConstraint("spacing_inches > 0", name="spacing_positive"),
    )


# =============================================================================
# BEDS
# =============================================================================

class BedModel(DatabaseBase):
    """
    A bed with its own planting grid.

    garden_x/garden_y are garden-grid cells; NULL means the bed is not placed.
    """
    __tablename__ = "beds"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(255), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    width_inches = Column(Integer, nullable=False)
    height_inches = Column(Integer, nullable=False)
    cell_inches = Column(Integer, nullable=False, default=12)
    garden_x = Column(Integer, nullable=True)
    garden_y = Column(Integer, nullable=True)
    garden_rotated = Column(Boolean, nullable=False, default=False)
    micro_climate = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        CheckConstraint("width_inches > 0", name="width_positive"),
        CheckConstraint("height_inches > 0", name="height_positive"),
        CheckConstraint("cell_inches > 0", name="cell_positive"),
    )

    def __repr__(self) -> str:
        return f"<BedModel(id={self.id}, name={self.name}, garden=({self.garden_x},{self.garden_y}))>"


# =============================================================================
# PLACEMENTS
# =============================================================================

class BedPlacementModel(DatabaseBase):
    """Live plant placement; the top-left cell (x, y) is unique within a bed."""
    __tablename__ = "bed_placements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    bed_id = Column(Integer, ForeignKey("beds.id", ondelete="CASCADE"), nullable=False, index=True)
    plant_id = Column(Integer, ForeignKey("plants.id"), nullable=False)
    x = Column(Integer, nullable=False)
    y = Column(Integer, nullable=False)
    w = Column(Integer, nullable=False, default=1)
    h = Column(Integer, nullable=False, default=1)
    count = Column(Integer, nullable=False, default=1)

    # Lifecycle
    seeds_started_date = Column(Date, nullable=True)
    transplanted_date = Column(Date, nullable=True)
    direct_sowed_date = Column(Date, nullable=True)
    harvest_started_date = Column(Date, nullable=True)
    harvest_ended_date = Column(Date, nullable=True)

    harvest_yield = Column(Float, nullable=True)
    harvest_yield_unit = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (
        UniqueConstraint("bed_id", "x", "y", name="uq_bed_placements_bed_cell"),
    )


class PlacementHistoryModel(DatabaseBase):
    """Archived placement. plant_name is denormalized so history survives catalog edits."""
    __tablename__ = "placement_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    bed_id = Column(Integer, ForeignKey("beds.id", ondelete="CASCADE"), nullable=False)
    plant_name = Column(String(200), nullable=False)
    plant_type = Column(String(50), nullable=True, comment="Plant family used for rotation")
    x = Column(Integer, nullable=False)
    y = Column(Integer, nullable=False)
    w = Column(Integer, nullable=False, default=1)
    h = Column(Integer, nullable=False, default=1)
    season_year = Column(Integer, nullable=False)
    season_name = Column(String(20), nullable=False)
    harvest_yield = Column(Float, nullable=True)
    harvest_yield_unit = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        Index("ix_placement_history_bed_season", "bed_id", "season_year", "season_name"),
    )


# =============================================================================
# GARDEN FEATURES
# =============================================================================

class WalkwayModel(DatabaseBase):
    __tablename__ = "walkways"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(255), nullable=False, index=True)
    name = Column(String(200), nullable=True)
    x = Column(Integer, nullable=False)
    y = Column(Integer, nullable=False)
    width = Column(Integer, nullable=False, default=1)
    height = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)


class GateModel(DatabaseBase):
    __tablename__ = "gates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(255), nullable=False, index=True)
    name = Column(String(200), nullable=True)
    x = Column(Integer, nullable=False)
    y = Column(Integer, nullable=False)
    width = Column(Integer, nullable=False, default=1)
    side = Column(String(10), nullable=False, default="bottom", comment="top, right, bottom or left")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)


# =============================================================================
# YEARLY ARCHIVES
# =============================================================================

class GardenYearModel(DatabaseBase):
    """Append-only yearly snapshot of the owner's garden and beds."""
    __tablename__ = "garden_years"

    id = Column(Integer, primary_key=True, autoincrement=True)
    owner_id = Column(String(255), nullable=False, index=True)
    year = Column(Integer, nullable=False)
    name = Column(String(200), nullable=False)
    garden_snapshot = Column(JSON, nullable=True)
    beds_snapshot = Column(JSON, nullable=False, default=list)
    total_beds = Column(Integer, nullable=False, default=0)
    total_placements = Column(Integer, nullable=False, default=0)
    total_harvest = Column(Float, nullable=True)
    harvest_unit = Column(String(20), nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    __table_args__ = (
        UniqueConstraint("owner_id", "year", name="uq_garden_years_owner_year"),
    )

    def __repr__(self) -> str:
        return f"<GardenYearModel(owner_id={self.owner_id}, year={self.year})>"
