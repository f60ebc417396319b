import httpx
from fastapi import FastAPI
from shared.config import settings
from shared.config.database import build_engine, build_session_factory, create_tables
from shared.observability import setup_observability
from .lookups import HttpDirectory, InMemoryDirectory
from .repository import InMemoryOrderRepository, SqlOrderRepository
from .router import router, public_router
from .service import OrderService

order_app = FastAPI(title="Order Service", version="1.0.0")

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(order_app, "order_service")

order_app.include_router(public_router)
order_app.include_router(router)


def build_directory():
    if not settings.DIRECTORY_URL:
        return InMemoryDirectory()
    client = httpx.AsyncClient(
        base_url=settings.DIRECTORY_URL,
        timeout=httpx.Timeout(settings.LOOKUP_TIMEOUT_SECONDS),
    )
    return HttpDirectory(client)


async def init_order_service(app: FastAPI):
    """Wires lookups and storage from settings onto app.state.order_service."""
    if settings.ORDER_STORE == "sql":
        engine = build_engine()
        await create_tables(engine)
        repository = SqlOrderRepository(build_session_factory(engine))
        app.state.engine = engine
    else:
        repository = InMemoryOrderRepository()

    directory = build_directory()
    app.state.directory = directory
    app.state.order_service = OrderService(
        customers=directory,
        cards=directory,
        carts=directory,
        payments=directory,
        repository=repository,
    )


async def close_order_service(app: FastAPI):
    directory = getattr(app.state, "directory", None)
    if isinstance(directory, HttpDirectory):
        await directory.aclose()
    engine = getattr(app.state, "engine", None)
    if engine is not None:
        await engine.dispose()


@order_app.on_event("startup")
async def startup_event():
    await init_order_service(order_app)


@order_app.on_event("shutdown")
async def shutdown_event():
    await close_order_service(order_app)
