import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from nav.core.config import settings
from nav.core.database import engine, Base, SessionLocal
from nav.core.errors import NavError
from nav.models import category, link, user  # noqa: F401  (tables pour create_all)
from nav.routers import health, auth, categories, links, users
from nav.services.user_service import bootstrap_super_admin

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

# Init DB
Base.metadata.create_all(bind=engine)

@asynccontextmanager
async def lifespan(app: FastAPI):
    db = SessionLocal()
    try:
        bootstrap_super_admin(db)
    finally:
        db.close()
    yield

app = FastAPI(
    title="Nav API",
    version="1.0.0",
    lifespan=lifespan
)

@app.exception_handler(NavError)
async def nav_error_handler(request: Request, exc: NavError):
    # NotFound 404, InvalidReorder 400, Forbidden 403, Store 500...
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

# Routes
app.include_router(health.router, prefix="/health")
app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(links.router)
app.include_router(users.router)
