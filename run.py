"""Entry point for serving the Expense Tracker API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8000``).

Usage:
    python run.py
"""
import uvicorn

from expense_tracker_api.app.core.config import settings
from expense_tracker_api.app.main import app


def main() -> None:
    """Serve the application until interrupted."""
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
