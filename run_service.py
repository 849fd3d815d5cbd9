#!/usr/bin/env python3
"""
Run the garage search service.
"""

import uvicorn

from garage_search.config import get_settings

if __name__ == "__main__":
    settings = get_settings()

    print("Starting Garage Search Service")
    print(f"   Version: {settings.app_version}")
    print(f"   Port: {settings.port}")
    print(f"   Debug: {settings.debug}")
    print(f"   Docs: http://localhost:{settings.port}/docs")
    print()

    uvicorn.run(
        "garage_search.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
