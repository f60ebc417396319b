from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from shared.config.database import Base

class OrderRecord(Base):
    __tablename__ = "orders"

    id = Column(String(36), primary_key=True) # UUID4 assigned on insert
    customer_id = Column(Integer, nullable=False, index=True)
    customer_name = Column(String, nullable=False)
    card_number = Column(String, nullable=False)
    registration_date = Column(DateTime, nullable=False) # naive, in ORDER_TIMEZONE
    total = Column(Float, nullable=False)
    valid_payment = Column(Boolean, nullable=False, default=False)

    items = relationship(
        "OrderItemRecord",
        back_populates="order",
        order_by="OrderItemRecord.position",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

class OrderItemRecord(Base):
    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False) # index in the sorted item sequence
    product_id = Column(Integer, nullable=False)
    total_amount = Column(Float, nullable=False)

    order = relationship("OrderRecord", back_populates="items")
