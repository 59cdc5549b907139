import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from chatbot.api.chat import router as chat_router
from chatbot.container import build_container, load_server_settings
from chatbot.schemas import HealthResponse
from chatbot.startup_self_check import run_startup_self_check

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self'; connect-src 'self' ws: wss:; "
        "style-src 'self' 'unsafe-inline'; object-src 'none'; frame-ancestors 'self'"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Referrer-Policy": "no-referrer",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Frame-Options": "SAMEORIGIN",
}


@asynccontextmanager
async def lifespan(_app: FastAPI):  # type: ignore[no-untyped-def]
    _app.state.startup_self_check = run_startup_self_check(
        public_dir=_app.state.container.public_dir,
        logger=logger,
    )
    yield


app = FastAPI(title="Chatbot Demo", version="0.1.0", lifespan=lifespan)
app.state.container = build_container()

app.add_middleware(GZipMiddleware, minimum_size=500)
app.add_middleware(
    CORSMiddleware,
    allow_origins=app.state.container.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def attach_security_headers(request: Request, call_next):  # type: ignore[no-untyped-def]
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


@app.get("/health")
def health() -> HealthResponse:
    return HealthResponse()


@app.get("/", include_in_schema=False)
def index() -> FileResponse:
    return FileResponse(app.state.container.public_dir / "index.html")


class PublicFiles(StaticFiles):
    """StaticFiles rooted at the current container's public_dir."""

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        public_dir = scope["app"].state.container.public_dir
        if self.directory != public_dir:
            self.directory = public_dir
            self.all_directories = self.get_directories(public_dir, None)
            self.config_checked = False
        await super().__call__(scope, receive, send)


app.include_router(chat_router)
app.mount(
    "/",
    PublicFiles(directory=app.state.container.public_dir, html=True, check_dir=False),
    name="public",
)


def run() -> None:
    settings = load_server_settings()
    logger.info("chatbot_server_starting host=%s port=%s", settings.host, settings.port)
    logger.info("chatbot_server_url url=http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
