from fastapi import APIRouter, Depends, HTTPException, Request
from .repository import DirectoryRepository
from .schemas import (
    CartItemResponse,
    CustomerCardResponse,
    CustomerResponse,
    PaymentStatusResponse,
)

router = APIRouter()

def get_directory(request: Request) -> DirectoryRepository:
    return request.app.state.directory

@router.get("/health")
async def health_check():
    return {"service": "directory", "status": "running"}

@router.get("/customers/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: int, directory: DirectoryRepository = Depends(get_directory)):
    customer = directory.get_customer(customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer

@router.get("/cards/{customer_id}", response_model=CustomerCardResponse)
async def get_card(customer_id: int, directory: DirectoryRepository = Depends(get_directory)):
    card = directory.get_card(customer_id)
    if not card:
        raise HTTPException(status_code=404, detail="Card not found")
    return card

# An empty cart is a 200 with [], not a 404
@router.get("/carts/{customer_id}/items", response_model=list[CartItemResponse])
async def get_cart_items(customer_id: int, directory: DirectoryRepository = Depends(get_directory)):
    return directory.get_cart_items(customer_id)

@router.get("/payments/{customer_id}", response_model=PaymentStatusResponse)
async def get_payment_status(customer_id: int, directory: DirectoryRepository = Depends(get_directory)):
    status = directory.get_payment_status(customer_id)
    if not status:
        raise HTTPException(status_code=404, detail="Payment record not found")
    return status
