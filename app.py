# app.py
"""
Thin entrypoint for the API.

Usage example:
    uvicorn app:app --reload
    python app.py
"""

import logging

import uvicorn

from schedule_api.core.config import settings
from schedule_api.main import app  # re-export FastAPI instance

logger = logging.getLogger(__name__)


def main():
    logger.info(
        "MADI Tutor API starting on port %s (env=%s, CORS origins=%s)",
        settings.app_port,
        settings.app_env,
        ", ".join(settings.cors_allow_origins),
    )
    uvicorn.run(app, host="0.0.0.0", port=settings.app_port)


if __name__ == "__main__":
    main()
