from fastapi import FastAPI
from shared.observability import setup_observability
from .repository import DirectoryRepository
from .router import router

directory_app = FastAPI(title="Directory Service", version="1.0.0")

# Metrics are exposed by the order app only; both share one registry
setup_observability(directory_app, "directory_service", metrics=False)

directory_app.state.directory = DirectoryRepository()

directory_app.include_router(router)
