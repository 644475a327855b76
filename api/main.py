import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import Settings
from core.db import Database
from core.errors import register_error_handlers
from core.log import setup_logging
from orders import router as orders_router

logger = logging.getLogger(__name__)

settings = Settings.from_env()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    # One pool per process, shared by every request.
    app.state.db = Database(settings.database)
    await app.state.db.connect()
    logger.info("API 服务启动：http://localhost:%d", settings.api_port)
    try:
        yield
    finally:
        await app.state.db.close()
        logger.info("API 服务已停止")


app = FastAPI(title="order-service", lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(orders_router.router, tags=["orders"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "order-service api"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
