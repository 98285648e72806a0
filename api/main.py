import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from companies import router as companies_router
from core import config, db, errors, schema
from industries import router as industries_router
from invoices import router as invoices_router

logging.basicConfig(
    level=config.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process; routes get it through db.get_pool.
    app.state.pool = await db.create_pool()
    try:
        if config.create_schema_on_startup():
            await schema.create_schema(app.state.pool)
            logger.info("schema_created env=%s", config.app_env())
        yield
    finally:
        await app.state.pool.close()
        app.state.pool = None


app = FastAPI(lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

errors.register_exception_handlers(app)

app.include_router(companies_router.router, tags=["companies"])
app.include_router(invoices_router.router, tags=["invoices"])
app.include_router(industries_router.router, tags=["industries"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
