"""주문 관련 SQLAlchemy ORM 모델 정의.

Order-related SQLAlchemy ORM model definitions.
Order is the aggregate root: it owns its OrderItems and its Delivery
(cascade save/delete), and references Member and Item without owning them.

Tables:
    - orders: 주문 (Orders; "order" is a reserved word)
    - order_item: 주문 상품 (Order lines with price snapshot)
    - delivery: 배송 (Delivery with embedded address)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from app.database import Base
from app.models.address import Address, address_columns
from app.models.item import Item
from app.models.member import Member
from app.utils.exceptions import IllegalStateError

# 주문 상태 — Order status values
ORDER_STATUS_ORDER: str = "ORDER"
ORDER_STATUS_CANCEL: str = "CANCEL"

# 배송 상태 — Delivery status values (READY → COMP)
DELIVERY_STATUS_READY: str = "READY"
DELIVERY_STATUS_COMP: str = "COMP"


class Delivery(Base):
    """배송 모델 — 주문 시점의 회원 주소를 복사해 보관합니다.

    Delivery model. The address is copied from the member when the order is placed.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        address: 배송지 (Embedded delivery address)
        status: 배송 상태 (Status: "READY" -> "COMP")
    """

    __tablename__ = "delivery"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    address: Mapped[Address] = composite(Address, *address_columns())
    # 배송 상태 — "READY" | "COMP"
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=DELIVERY_STATUS_READY)

    order = relationship("Order", back_populates="delivery", uselist=False)


class Order(Base):
    """주문 모델 — 주문 애그리거트 루트.

    Order aggregate root.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        member_id: 주문 회원 FK (Ordering member)
        delivery_id: 배송 FK (Owned delivery)
        order_date: 주문 일시 UTC (Order timestamp)
        status: 주문 상태 (Status: "ORDER" -> "CANCEL")

    Relationships:
        member: 주문 회원 (Referenced member)
        delivery: 배송 정보 (Owned delivery, cascade)
        order_items: 주문 상품 목록 (Owned order lines, cascade delete-orphan)
    """

    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    member_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("member.id"), nullable=False, index=True)
    delivery_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("delivery.id"), nullable=False, unique=True)
    order_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 주문 상태 — "ORDER" | "CANCEL"
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=ORDER_STATUS_ORDER)

    member = relationship("Member", back_populates="orders")
    delivery = relationship("Delivery", back_populates="order", cascade="all")
    order_items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan")

    # ---- 연관관계 편의 메서드 — Association helpers ----

    def add_order_item(self, order_item: "OrderItem") -> None:
        """주문 상품을 추가합니다. backref가 order_item.order를 채웁니다 (Attach an order line)."""
        self.order_items.append(order_item)

    # ---- 생성 — Factory ----

    @classmethod
    def create_order(cls, member: Member, delivery: Delivery, *order_items: "OrderItem") -> "Order":
        """주문을 생성합니다. 상태는 ORDER, 주문 일시는 현재 시각.

        Build a new order in ORDER status stamped with the current time.

        Args:
            member: 주문 회원 (Ordering member)
            delivery: 배송 정보 (Delivery to own)
            *order_items: 주문 상품들 (Order lines to own)

        Returns:
            Order: 아직 세션에 추가되지 않은 주문 (New, not yet added to a session)
        """
        order = cls(
            member=member,
            delivery=delivery,
            status=ORDER_STATUS_ORDER,
            order_date=datetime.now(timezone.utc),
            order_items=[],
        )
        for order_item in order_items:
            order.add_order_item(order_item)
        return order

    # ---- 비즈니스 로직 — Business logic ----

    def cancel(self) -> None:
        """주문을 취소하고 각 주문 상품의 재고를 복원합니다.

        Cancel the order and restore stock for every order line.
        Requires delivery, order_items and each OrderItem.item to be loaded.

        Raises:
            IllegalStateError: 이미 배송 완료되었거나 이미 취소된 주문
                               (Delivery completed or order already cancelled)
        """
        if self.delivery.status == DELIVERY_STATUS_COMP:
            raise IllegalStateError("Delivered orders cannot be cancelled")
        if self.status == ORDER_STATUS_CANCEL:
            raise IllegalStateError("Order is already cancelled")

        self.status = ORDER_STATUS_CANCEL
        for order_item in self.order_items:
            order_item.cancel()

    # ---- 조회 로직 — Queries ----

    @property
    def total_price(self) -> int:
        """전체 주문 가격 (Sum of every order line subtotal)."""
        return sum(order_item.total_price for order_item in self.order_items)


class OrderItem(Base):
    """주문 상품 모델 — 주문 시점의 가격과 수량 스냅샷.

    Order line holding a snapshot of the price and the ordered count.
    Immutable once created.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        item_id: 상품 FK (Ordered item)
        order_id: 주문 FK (Owning order)
        order_price: 주문 시점 단가 (Unit price at order time)
        count: 주문 수량 (Ordered quantity)
    """

    __tablename__ = "order_item"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    item_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("item.id"), nullable=False)
    order_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    order_price: Mapped[int] = mapped_column(Integer, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False)

    item = relationship("Item")
    order = relationship("Order", back_populates="order_items")

    @classmethod
    def create_order_item(cls, item: Item, order_price: int, count: int) -> "OrderItem":
        """주문 상품을 생성하고 상품 재고를 차감합니다.

        Decrement the item's stock, then build the order line.
        The stock check runs first so nothing is built when it fails.

        Raises:
            NotEnoughStockError: 재고 부족 (Not enough stock)
        """
        item.remove_stock(count)
        return cls(item=item, order_price=order_price, count=count)

    def cancel(self) -> None:
        """주문 수량만큼 재고를 원복합니다 (Give the ordered count back to stock)."""
        self.item.add_stock(self.count)

    @property
    def total_price(self) -> int:
        """주문 상품 가격 (order_price * count)."""
        return self.order_price * self.count
