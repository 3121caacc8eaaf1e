#!/usr/bin/env python3
"""
Bank Kata Account Service Entry Point

Starts the FastAPI server with a fresh in-memory account.
"""

import sys

from bank_kata.api import run_server
from bank_kata.config import get_config


if __name__ == "__main__":
    config = get_config()
    print("🏦 Starting Bank Kata Account Service...")
    print(f"🌐 API available at: http://{config.api_host}:{config.api_port}")
    print(f"📚 Documentation at: http://{config.api_host}:{config.api_port}/docs")
    print()
    
    try:
        run_server(config)
    except KeyboardInterrupt:
        print("\n👋 Shutting down Bank Kata Account Service...")
    except Exception as e:
        print(f"❌ Error starting server: {e}")
        sys.exit(1)
