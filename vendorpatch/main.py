"""
vendorpatch Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vendorpatch.routers import config, patch
from vendorpatch.services.config_manager import ConfigManager

LOCAL_ORIGIN_REGEX = r"https?://(localhost|127\.0\.0\.1|\[::1\])(:\d+)?"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting vendorpatch backend...")
    config_manager = ConfigManager.get_instance()
    context_lines, lookahead = config_manager.diff_settings()
    print(
        f"[Backend] ConfigManager initialized from {config_manager.config_file} "
        f"(contextLines={context_lines}, lookahead={lookahead})"
    )

    yield
    print("[Backend] Shutting down vendorpatch backend...")


app = FastAPI(
    title="vendorpatch Backend",
    description="Unified diff patches for vendor package modifications",
    version="1.0.0",
    lifespan=lifespan,
)

# Editor plugins call the backend from localhost only
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=LOCAL_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(patch.router, prefix="/api/patch", tags=["patch"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "vendorpatch-backend"}


def run():
    """Start the server with host/port from the ``server`` config section"""
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "127.0.0.1"), port=int(server.get("port", 8000)))


if __name__ == "__main__":
    run()
