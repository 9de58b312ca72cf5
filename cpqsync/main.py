# cpqsync/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI

from cpqsync.core.logging_config import configure_logging
from cpqsync.routes import health, sync
from cpqsync.scheduler import start_scheduler, stop_scheduler

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await start_scheduler()
    try:
        yield  # This is where the app runs
    finally:
        await stop_scheduler()

app = FastAPI(
    title="Shopify → XaitCPQ Part Sync",
    lifespan=lifespan
)

app.include_router(sync.router)
app.include_router(health.router)
