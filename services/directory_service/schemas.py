from pydantic import BaseModel

class CustomerResponse(BaseModel):
    id: int
    first_name: str
    last_name: str

class CustomerCardResponse(BaseModel):
    customer_id: int
    long_num: str

class CartItemResponse(BaseModel):
    customer_id: int
    product_id: int
    quantity: int
    unit_price: float

class PaymentStatusResponse(BaseModel):
    customer_id: int
    valid_payment: bool
