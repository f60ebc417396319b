from datetime import datetime
from typing import List
from pydantic import BaseModel

class OrderSubmit(BaseModel):
    customer_id: int

class CustomerSchema(BaseModel):
    customer_id: int
    full_name: str

    class Config:
        from_attributes = True

class PaymentCardSchema(BaseModel):
    long_num: str

    class Config:
        from_attributes = True

class CartItemSchema(BaseModel):
    product_id: int
    total_amount: float

    class Config:
        from_attributes = True

class OrderResponse(BaseModel):
    order_id: str
    customer: CustomerSchema
    card: PaymentCardSchema
    items: List[CartItemSchema]
    registration_date: datetime
    total_amount: float
    valid_payment: bool

    class Config:
        from_attributes = True
