# ticket_system/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from ticket_system.auth.routes import router as auth_router
from ticket_system.core.config import get_settings
from ticket_system.core.database import SessionLocal, init_db
from ticket_system.core.errors import register_exception_handlers
from ticket_system.core.logging import configure_logging
from ticket_system.core.metrics import PrometheusMetrics, install_metrics_middleware
from ticket_system.ticket.routes import router as ticket_router
from ticket_system.user.routes import router as admin_router
from ticket_system.user.services import UserService

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

init_db()


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
        db = SessionLocal()
        try:
            UserService(db).ensure_admin(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
        finally:
            db.close()
    logger.info("%s %s ready", settings.APP_NAME, settings.APP_VERSION)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESC,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)
app.state.metrics = PrometheusMetrics()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_metrics_middleware(app)
register_exception_handlers(app)

# Routers
app.include_router(ticket_router)
app.include_router(admin_router)
app.include_router(auth_router)


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


@app.get("/metrics", tags=["Health"], include_in_schema=False)
def metrics(request: Request):
    payload, content_type = request.app.state.metrics.render()
    return Response(content=payload, media_type=content_type)


def run() -> None:
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
