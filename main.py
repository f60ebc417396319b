from fastapi import FastAPI

from services.order_service.main import order_app, init_order_service, close_order_service
from services.directory_service.main import directory_app

app = FastAPI(title="Order Assembly Cluster")

# Mounted apps do not get their own startup/shutdown events
@app.on_event("startup")
async def startup_event():
    await init_order_service(order_app)

@app.on_event("shutdown")
async def shutdown_event():
    await close_order_service(order_app)

app.mount("/orders", order_app)
app.mount("/directory", directory_app)
