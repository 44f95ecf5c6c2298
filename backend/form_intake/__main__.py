"""Command-line entry point for the form-intake server.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""

from __future__ import annotations as _annotations

# =============================================================================
# Section 1: Imports
# =============================================================================
# Third-party (alphabetical)
import uvicorn
from fastapi import FastAPI

# Local imports (core first, then alphabetical)
from . import __version__
from .api import create_app
from .core.constants import SERVICE_NAME
from .infra import configure_instrumentation, get_logger, load_settings

# =============================================================================
# Section 2: Module Exports
# =============================================================================
__all__ = ("build_app", "main")


# =============================================================================
# Section 12: Functions
# =============================================================================
def build_app() -> FastAPI:
    """Create the served application with instrumentation attached."""
    settings = load_settings()
    app = create_app(settings)
    configure_instrumentation(service_name=SERVICE_NAME, environment=settings.environment, app=app)
    return app


def main() -> None:
    """Run the intake server with uvicorn.

    Without reload the instrumented app object is served directly. With
    reload, uvicorn re-imports ``build_app`` as a factory in the worker
    process so the served app is the instrumented one there too.
    """
    settings = load_settings()
    get_logger("cli").info(
        "server_starting", version=__version__, host=settings.host, port=settings.port
    )
    if settings.reload:
        uvicorn.run(
            "form_intake.__main__:build_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            reload=True,
        )
    else:
        uvicorn.run(build_app(), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
