"""Create garden layout tables

Revision ID: 001
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create garden layout tables"""

    # 1. Gardens (one per owner)
    op.create_table('gardens',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.String(255), nullable=False, comment='Opaque owner id'),
        sa.Column('width_inches', sa.Integer(), nullable=False),
        sa.Column('height_inches', sa.Integer(), nullable=False),
        sa.Column('cell_inches', sa.Integer(), nullable=False, comment='Garden grid pitch'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_gardens'),
        sa.UniqueConstraint('owner_id', name='uq_gardens_owner_id'),
        sa.CheckConstraint('width_inches > 0', name='ck_gardens_width_positive'),
        sa.CheckConstraint('height_inches > 0', name='ck_gardens_height_positive'),
        sa.CheckConstraint('cell_inches > 0', name='ck_gardens_cell_positive'),
    )

    # 2. Plant catalog
    op.create_table('plants',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.String(255), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('spacing_inches', sa.Integer(), nullable=False, comment='Minimum spacing between plants'),
        sa.Column('days_to_maturity_min', sa.Integer(), nullable=True),
        sa.Column('days_to_maturity_max', sa.Integer(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_plants'),
        sa.CheckConstraint('spacing_inches > 0', name='ck_plants_spacing_positive'),
    )
    op.create_index('ix_plants_owner_id', 'plants', ['owner_id'])

    # 3. Beds
    op.create_table('beds',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.String(255), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('width_inches', sa.Integer(), nullable=False),
        sa.Column('height_inches', sa.Integer(), nullable=False),
        sa.Column('cell_inches', sa.Integer(), nullable=False),
        sa.Column('garden_x', sa.Integer(), nullable=True),
        sa.Column('garden_y', sa.Integer(), nullable=True),
        sa.Column('garden_rotated', sa.Boolean(), nullable=False),
        sa.Column('micro_climate', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_beds'),
        sa.CheckConstraint('width_inches > 0', name='ck_beds_width_positive'),
        sa.CheckConstraint('height_inches > 0', name='ck_beds_height_positive'),
        sa.CheckConstraint('cell_inches > 0', name='ck_beds_cell_positive'),
    )
    op.create_index('ix_beds_owner_id', 'beds', ['owner_id'])

    # 4. Live placements
    op.create_table('bed_placements',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('bed_id', sa.Integer(), nullable=False),
        sa.Column('plant_id', sa.Integer(), nullable=False),
        sa.Column('x', sa.Integer(), nullable=False),
        sa.Column('y', sa.Integer(), nullable=False),
        sa.Column('w', sa.Integer(), nullable=False),
        sa.Column('h', sa.Integer(), nullable=False),
        sa.Column('count', sa.Integer(), nullable=False),
        sa.Column('seeds_started_date', sa.Date(), nullable=True),
        sa.Column('transplanted_date', sa.Date(), nullable=True),
        sa.Column('direct_sowed_date', sa.Date(), nullable=True),
        sa.Column('harvest_started_date', sa.Date(), nullable=True),
        sa.Column('harvest_ended_date', sa.Date(), nullable=True),
        sa.Column('harvest_yield', sa.Float(), nullable=True),
        sa.Column('harvest_yield_unit', sa.String(20), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_bed_placements'),
        sa.ForeignKeyConstraint(['bed_id'], ['beds.id'], name='fk_bed_placements_bed_id_beds', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['plant_id'], ['plants.id'], name='fk_bed_placements_plant_id_plants'),
        sa.UniqueConstraint('bed_id', 'x', 'y', name='uq_bed_placements_bed_cell'),
    )
    op.create_index('ix_bed_placements_bed_id', 'bed_placements', ['bed_id'])

    # 5. Placement history
    op.create_table('placement_history',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('bed_id', sa.Integer(), nullable=False),
        sa.Column('plant_name', sa.String(200), nullable=False),
        sa.Column('plant_type', sa.String(50), nullable=True, comment='Plant family used for rotation'),
        sa.Column('x', sa.Integer(), nullable=False),
        sa.Column('y', sa.Integer(), nullable=False),
        sa.Column('w', sa.Integer(), nullable=False),
        sa.Column('h', sa.Integer(), nullable=False),
        sa.Column('season_year', sa.Integer(), nullable=False),
        sa.Column('season_name', sa.String(20), nullable=False),
        sa.Column('harvest_yield', sa.Float(), nullable=True),
        sa.Column('harvest_yield_unit', sa.String(20), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_placement_history'),
        sa.ForeignKeyConstraint(['bed_id'], ['beds.id'], name='fk_placement_history_bed_id_beds', ondelete='CASCADE'),
    )
    op.create_index(
        'ix_placement_history_bed_season', 'placement_history', ['bed_id', 'season_year', 'season_name']
    )

    # 6. Walkways and gates
    op.create_table('walkways',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.String(255), nullable=False),
        sa.Column('name', sa.String(200), nullable=True),
        sa.Column('x', sa.Integer(), nullable=False),
        sa.Column('y', sa.Integer(), nullable=False),
        sa.Column('width', sa.Integer(), nullable=False),
        sa.Column('height', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_walkways'),
    )
    op.create_index('ix_walkways_owner_id', 'walkways', ['owner_id'])

    op.create_table('gates',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.String(255), nullable=False),
        sa.Column('name', sa.String(200), nullable=True),
        sa.Column('x', sa.Integer(), nullable=False),
        sa.Column('y', sa.Integer(), nullable=False),
        sa.Column('width', sa.Integer(), nullable=False),
        sa.Column('side', sa.String(10), nullable=False, comment='top, right, bottom or left'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_gates'),
    )
    op.create_index('ix_gates_owner_id', 'gates', ['owner_id'])

    # 7. Yearly archives
    op.create_table('garden_years',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('owner_id', sa.String(255), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('garden_snapshot', sa.JSON(), nullable=True),
        sa.Column('beds_snapshot', sa.JSON(), nullable=False),
        sa.Column('total_beds', sa.Integer(), nullable=False),
        sa.Column('total_placements', sa.Integer(), nullable=False),
        sa.Column('total_harvest', sa.Float(), nullable=True),
        sa.Column('harvest_unit', sa.String(20), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_garden_years'),
        sa.UniqueConstraint('owner_id', 'year', name='uq_garden_years_owner_year'),
    )
    op.create_index('ix_garden_years_owner_id', 'garden_years', ['owner_id'])


def downgrade() -> None:
    """Drop garden layout tables"""
    op.drop_table('garden_years')
    op.drop_table('gates')
    op.drop_table('walkways')
    op.drop_table('placement_history')
    op.drop_table('bed_placements')
    op.drop_table('beds')
    op.drop_table('plants')
    op.drop_table('gardens')
