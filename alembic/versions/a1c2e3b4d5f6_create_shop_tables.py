"""create_shop_tables

Revision ID: a1c2e3b4d5f6
Revises:
Create Date: 2026-10-19 10:00:00.000000

쇼핑몰 기본 테이블 생성: member, item, delivery, orders, order_item.
Create the shop tables: member, item (single-table inheritance), delivery,
orders, order_item.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c2e3b4d5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # member — 회원, 주소는 city/street/zipcode 컬럼으로 내장
    # Members with the embedded address columns
    op.create_table(
        'member',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('city', sa.String(100), nullable=True),
        sa.Column('street', sa.String(255), nullable=True),
        sa.Column('zipcode', sa.String(20), nullable=True),
    )
    op.create_index('ix_member_name', 'member', ['name'])

    # item — 단일 테이블 상속, dtype: B=Book, A=Album, M=Movie
    # Single-table inheritance for all item subtypes
    op.create_table(
        'item',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('dtype', sa.String(31), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('author', sa.String(255), nullable=True),
        sa.Column('isbn', sa.String(50), nullable=True),
        sa.Column('artist', sa.String(255), nullable=True),
        sa.Column('etc', sa.String(255), nullable=True),
        sa.Column('director', sa.String(255), nullable=True),
        sa.Column('actor', sa.String(255), nullable=True),
        sa.CheckConstraint('stock_quantity >= 0', name='ck_item_stock_non_negative'),
    )

    # delivery — 배송, 주문 시점 회원 주소 복사본
    # Deliveries holding a copy of the member address
    op.create_table(
        'delivery',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('city', sa.String(100), nullable=True),
        sa.Column('street', sa.String(255), nullable=True),
        sa.Column('zipcode', sa.String(20), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='READY'),
    )

    # orders — 주문 (order는 예약어)
    # Orders ("order" is a reserved word)
    op.create_table(
        'orders',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('member_id', sa.Uuid(), sa.ForeignKey('member.id'), nullable=False),
        sa.Column('delivery_id', sa.Uuid(), sa.ForeignKey('delivery.id'), nullable=False, unique=True),
        sa.Column('order_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='ORDER'),
    )
    op.create_index('ix_orders_member_id', 'orders', ['member_id'])

    # order_item — 주문 상품, 주문 시점 가격 스냅샷
    # Order lines with the price snapshot
    op.create_table(
        'order_item',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('item_id', sa.Uuid(), sa.ForeignKey('item.id'), nullable=False),
        sa.Column('order_id', sa.Uuid(), sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False),
        sa.Column('order_price', sa.Integer(), nullable=False),
        sa.Column('count', sa.Integer(), nullable=False),
    )
    op.create_index('ix_order_item_order_id', 'order_item', ['order_id'])


def downgrade() -> None:
    op.drop_index('ix_order_item_order_id', table_name='order_item')
    op.drop_table('order_item')
    op.drop_index('ix_orders_member_id', table_name='orders')
    op.drop_table('orders')
    op.drop_table('delivery')
    op.drop_table('item')
    op.drop_index('ix_member_name', table_name='member')
    op.drop_table('member')
