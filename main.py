"""Main application entry point."""

import sys

from events_catalog.config.environment import IS_PRODUCTION_ENVIRONMENT, PORT
from events_catalog.api.app import app

if __name__ == "__main__":
    import uvicorn

    if not IS_PRODUCTION_ENVIRONMENT:
        # Development mode - string reference is required for hot-reload
        uvicorn.run(
            "events_catalog.api.app:app",
            host="0.0.0.0",
            port=PORT,
            reload=True,
            log_level="debug"
        )
    else:
        # Production mode - single process so a fatal fault can be reported below
        uvicorn.run(
            app,
            host="0.0.0.0",
            port=PORT,
            reload=False,
            log_level="info",
            proxy_headers=True,
            forwarded_allow_ips="*"
        )
        if app.state.fatal_fault:
            sys.exit(1)
