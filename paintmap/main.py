"""
FastAPI main application
Paint Map - account and map storage behind a single dispatch endpoint

- api/dispatch.py: GET /?function=... (all account and map functions)
- api/health.py: Health check

Stores live on app.state.paintmap, one AppState per application.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from paintmap.api import health
from paintmap.api.dispatch import build_router
from paintmap.config import resolve_config
from paintmap.models import ServerConfig
from paintmap.state import build_state


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    logger.info(f"✅ Server started (default map type: {app.state.paintmap.config.default_map_type})")
    
    yield
    
    # State is process-lifetime only
    logger.info(f"🛑 Server shutting down, dropping {app.state.paintmap.accounts.count()} accounts")


def create_app(config: ServerConfig = None) -> FastAPI:
    """Build the application with fresh, empty stores"""
    config = config or ServerConfig()

    app = FastAPI(
        title="Paint Map Server",
        description="Accounts, maps and shared maps behind one dispatch endpoint",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.paintmap = build_state(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check (GET /health)
    app.include_router(health.router)

    # Dispatch endpoint (GET / and GET /api by default)
    app.include_router(build_router(config.api_paths))

    return app


# ==================== APPLICATION ====================

config = resolve_config()

logging.basicConfig(
    level=config.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = create_app(config)


def run():
    """Console entry point"""
    import uvicorn
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    run()
