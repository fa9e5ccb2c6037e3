import uvicorn
from fastapi import FastAPI

from boost.api.routes.health import router as health_router
from boost.api.routes.recommend import router as recommend_router
from boost.api.routes.wallet import router as wallet_router
from boost.config import settings

app = FastAPI(title="Boost API", version="0.1.0")
app.include_router(health_router)
app.include_router(recommend_router)
app.include_router(wallet_router)


def run() -> None:
    uvicorn.run("boost.api.app:app", host=settings.app_host, port=settings.app_port, reload=False)
