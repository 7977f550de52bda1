"""Initial migration

Revision ID: 001
Revises: 
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    ]


def upgrade() -> None:
    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=50), nullable=False),
        sa.Column('last_name', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=False, server_default='user'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    # Reference catalogs
    op.create_table(
        'developers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('website', sa.String(length=500), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_developers_id'), 'developers', ['id'], unique=False)
    op.create_index(op.f('ix_developers_name'), 'developers', ['name'], unique=True)

    op.create_table(
        'compounds',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('location', sa.String(length=500), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_compounds_id'), 'compounds', ['id'], unique=False)
    op.create_index(op.f('ix_compounds_name'), 'compounds', ['name'], unique=True)

    op.create_table(
        'amenities',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_amenities_id'), 'amenities', ['id'], unique=False)
    op.create_index(op.f('ix_amenities_name'), 'amenities', ['name'], unique=True)

    # Create apartments table
    op.create_table(
        'apartments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('unit_name', sa.String(length=100), nullable=False),
        sa.Column('unit_number', sa.String(length=20), nullable=False),
        sa.Column('project', sa.String(length=200), nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('state', sa.String(length=100), nullable=True),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('listing_type', sa.String(length=10), nullable=False, server_default='rent'),
        sa.Column('bedrooms', sa.Integer(), nullable=False),
        sa.Column('bathrooms', sa.Integer(), nullable=False),
        sa.Column('square_feet', sa.Float(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('images', sa.JSON(), nullable=False),
        sa.Column('is_available', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('agent_id', sa.Integer(), nullable=False),
        sa.Column('developer_id', sa.Integer(), nullable=False),
        sa.Column('compound_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['agent_id'], ['users.id']),
        sa.ForeignKeyConstraint(['developer_id'], ['developers.id']),
        sa.ForeignKeyConstraint(['compound_id'], ['compounds.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_apartments_id'), 'apartments', ['id'], unique=False)
    op.create_index(op.f('ix_apartments_city'), 'apartments', ['city'], unique=False)
    op.create_index(op.f('ix_apartments_price'), 'apartments', ['price'], unique=False)
    op.create_index(op.f('ix_apartments_listing_type'), 'apartments', ['listing_type'], unique=False)
    op.create_index('ix_apartments_available_created', 'apartments', ['is_available', 'created_at'], unique=False)
    op.create_index('ix_apartments_agent_created', 'apartments', ['agent_id', 'created_at'], unique=False)
    op.create_index('ix_apartments_compound_available', 'apartments', ['compound_id', 'is_available'], unique=False)
    op.create_index('ix_apartments_developer_available', 'apartments', ['developer_id', 'is_available'], unique=False)

    op.create_table(
        'apartment_amenities',
        sa.Column('apartment_id', sa.Integer(), nullable=False),
        sa.Column('amenity_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['apartment_id'], ['apartments.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['amenity_id'], ['amenities.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('apartment_id', 'amenity_id')
    )

    # Favorites: composite key makes membership a set
    op.create_table(
        'apartment_favorites',
        sa.Column('apartment_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['apartment_id'], ['apartments.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('apartment_id', 'user_id')
    )
    op.create_index(op.f('ix_apartment_favorites_user_id'), 'apartment_favorites', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_apartment_favorites_user_id'), table_name='apartment_favorites')
    op.drop_table('apartment_favorites')
    op.drop_table('apartment_amenities')

    op.drop_index('ix_apartments_developer_available', table_name='apartments')
    op.drop_index('ix_apartments_compound_available', table_name='apartments')
    op.drop_index('ix_apartments_agent_created', table_name='apartments')
    op.drop_index('ix_apartments_available_created', table_name='apartments')
    op.drop_index(op.f('ix_apartments_listing_type'), table_name='apartments')
    op.drop_index(op.f('ix_apartments_price'), table_name='apartments')
    op.drop_index(op.f('ix_apartments_city'), table_name='apartments')
    op.drop_index(op.f('ix_apartments_id'), table_name='apartments')
    op.drop_table('apartments')

    for table in ('amenities', 'compounds', 'developers'):
        op.drop_index(op.f(f'ix_{table}_name'), table_name=table)
        op.drop_index(op.f(f'ix_{table}_id'), table_name=table)
        op.drop_table(table)

    op.drop_index(op.f('ix_users_role'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
