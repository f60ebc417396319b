from fastapi import APIRouter, Depends, HTTPException, Request
from .errors import (
    CardNotFound,
    CustomerNotFound,
    EmptyCart,
    LookupFailed,
    LookupTimeout,
    PaymentRecordNotFound,
    StorageInconsistency,
)
from .schemas import OrderResponse, OrderSubmit
from .service import OrderService

router = APIRouter()
public_router = APIRouter()  # For any public endpoints (e.g. health check)

def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service

@public_router.get("/health")
async def health_check():
    return {"service": "order", "status": "running"}

@router.post("/", response_model=OrderResponse, status_code=201)
async def submit_order(payload: OrderSubmit, service: OrderService = Depends(get_order_service)):
    try:
        order = await service.submit_order(payload.customer_id)
    except (CustomerNotFound, CardNotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except EmptyCart as e:
        raise HTTPException(status_code=422, detail=str(e))
    except PaymentRecordNotFound as e:
        # The order exists (with an invalid payment); tell the caller which one
        raise HTTPException(status_code=409, detail={"message": str(e), "order_id": e.order_id})
    except LookupTimeout as e:
        raise HTTPException(status_code=504, detail=str(e))
    except LookupFailed as e:
        raise HTTPException(status_code=502, detail=str(e))
    except StorageInconsistency as e:
        raise HTTPException(status_code=500, detail=str(e))
    return OrderResponse.model_validate(order)

@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, service: OrderService = Depends(get_order_service)):
    order = await service.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return OrderResponse.model_validate(order)
