from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shortener_app.api.errors import register_exception_handlers
from shortener_app.api.v1 import redirect, urls
from shortener_app.config import Settings, settings as default_settings
from shortener_app.dependencies import build_url_service
from shortener_app.logging_config import setup_logging
from shortener_app.services.url_service import URLService


def create_app(
    config: Optional[Settings] = None,
    url_service: Optional[URLService] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Settings to use (default: loaded from environment)
        url_service: Pre-built service (default: wired from settings)
    """
    config = config or default_settings
    setup_logging(config.log_level, json_format=config.log_json)

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        description="A URL shortener service built with FastAPI",
        debug=config.debug
    )
    app.state.settings = config
    app.state.url_service = url_service or build_url_service(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/")
    def read_root():
        """Root endpoint with API information"""
        return {
            "message": f"Welcome to {config.app_name}",
            "version": config.app_version,
            "docs": "/docs",
            "redoc": "/redoc"
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "environment": config.environment}

    ######## Include routers
    app.include_router(urls.router)
    app.include_router(redirect.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
