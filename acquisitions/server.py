"""
Run the API with uvicorn:

  python -m acquisitions.server

HOST and PORT come from settings (env or .env).
"""

import uvicorn

from acquisitions.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "acquisitions.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
