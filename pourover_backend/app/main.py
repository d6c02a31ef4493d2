# main.py: backend entrypoint
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from pourover_backend.app.config import APP_ENV, CORS_ORIGINS
from pourover_backend.app.db.session import init_db
from pourover_backend.app.recipes.presets_loader import load_presets
from pourover_backend.app.routers import brew, recipes, users
from pourover_backend.app.utils.log import get_logger

log = get_logger("pourover.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    log.info("Database tables checked/created (%s)", APP_ENV)
    load_presets()
    _log_routes(app)
    yield


def _log_routes(app: FastAPI) -> None:
    log.info("-- Routes mounted --")
    for r in app.router.routes:
        if isinstance(r, APIRoute):
            methods = ",".join(sorted(r.methods))
            log.info("%-10s %s", methods, r.path)


app = FastAPI(title="Pour-over API", lifespan=lifespan)

# --- CORS for the web dev server ---------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Routers under /api ------------------------------------------------------
app.include_router(brew.router, prefix="/api")      # /api/brew/...
app.include_router(recipes.router, prefix="/api")   # /api/recipes/...
app.include_router(users.router, prefix="/api")     # /api/users, /api/test-connection


# --- Small probes ------------------------------------------------------------
@app.get("/")
async def hello() -> str:
    return "Hello World!"

@app.get("/status")
async def status():
    return {"ok": True}

@app.get("/health")
async def health():
    return {"ok": True}

@app.get("/api/health")
async def api_health():
    # mirror the non-prefixed /health so the FE's /api/health succeeds
    return {"ok": True}

@app.get("/message/{name}")
async def message(name: str):
    return {"message": f"hello {name}"}
