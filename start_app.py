#!/usr/bin/env python
"""Start the FastAPI application on the configured port."""
import uvicorn

from cpqsync.core.config import get_settings

if __name__ == "__main__":
    port = get_settings().PORT

    print(f"Starting application on port {port}")

    uvicorn.run(
        "cpqsync.main:app",
        host="0.0.0.0",
        port=port,
        log_level="info"
    )
