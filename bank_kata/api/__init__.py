"""
Bank Kata API Application Factory
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from .. import __version__
from ..config import BankKataConfig, get_config
from ..ledger import Ledger
from ..logging_config import setup_logging
from .account import router as account_router
from .schemas import HealthResponse


def create_app(ledger: Optional[Ledger] = None,
               config: Optional[BankKataConfig] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.
    
    Args:
        ledger: Ledger served by this app; a fresh one is created if omitted
        config: Service configuration; the global configuration if omitted
    """
    config = config or get_config()
    
    app = FastAPI(
        title="Bank Kata Account API",
        description="Single in-memory bank account with statement and history",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.ledger = ledger if ledger is not None else Ledger()
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    app.include_router(account_router, prefix="/account", tags=["Account"])
    
    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint"""
        return HealthResponse(
            status="healthy",
            service=config.service_name,
            version=__version__
        )

    @app.get("/")
    async def get_api_info():
        """Get API information"""
        return {
            "name": "Bank Kata Account API",
            "version": __version__,
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "deposit": "/account/deposit",
                "withdraw": "/account/withdraw",
                "statement": "/account/statement",
                "history": "/account/history",
                "historyByDate": "/account/historyByDate",
            }
        }
    
    return app


def run_server(config: Optional[BankKataConfig] = None):
    """Run the API server with uvicorn"""
    config = config or get_config()
    setup_logging(config.log_level, "bank_kata", config.log_format)
    
    if config.api_reload:
        # Reload needs an import string so uvicorn can rebuild the app
        uvicorn.run(
            "bank_kata.api:create_app",
            factory=True,
            host=config.api_host,
            port=config.api_port,
            reload=True,
            log_level=config.log_level.lower()
        )
    else:
        uvicorn.run(
            create_app(config=config),
            host=config.api_host,
            port=config.api_port,
            log_level=config.log_level.lower()
        )
