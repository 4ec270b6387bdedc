# __main__.py
import logging

import uvicorn

from .api.main import app
from .api.settings import settings


def main():
    logging.info(f"Server running on http://localhost:{settings.PORT}")
    logging.info(f"Swagger docs available at http://localhost:{settings.PORT}{settings.DOCS_URL}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
