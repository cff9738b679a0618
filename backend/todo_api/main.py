# todo_api/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api.errors import register_exception_handlers
from todo_api.api.v1.routers import auth, health, todos, users
from todo_api.config import settings
from todo_api.core.bootstrap import ensure_default_admin
from todo_api.core.db import close_db, init_db
from todo_api.core.logging import configure_logging

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME, version=settings.APP_VERSION)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.on_event("startup")
async def on_startup():
    configure_logging(settings.log_level)
    await init_db(generate_schemas=settings.generate_schemas)
    # Ensure there's a default admin account on first run
    await ensure_default_admin()
    logger.info("[startup] %s ready (env=%s)", settings.APP_NAME, settings.env)


@app.on_event("shutdown")
async def on_shutdown():
    await close_db()


# REST
app.include_router(auth.router, prefix="/api")
app.include_router(todos.router, prefix="/api")
app.include_router(users.router, prefix="/api")

# Health checks
app.include_router(health.router)
