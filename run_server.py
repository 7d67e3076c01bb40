#!/usr/bin/env python3
"""Run the Business Ideas API server."""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from business_ideas.config import get_settings


def main():
    import uvicorn

    settings = get_settings()

    print(f"""
    Business Ideas API
      URL:        http://{settings.HOST}:{settings.PORT}/api
      API Docs:   http://{settings.HOST}:{settings.PORT}/docs
      Database:   {settings.DATABASE_PATH}
      Hot Reload: {settings.SERVER_RELOAD}
    """)

    uvicorn.run(
        "server.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.SERVER_RELOAD,
    )


if __name__ == "__main__":
    main()
