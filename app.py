from pathlib import Path

import uvicorn

from backend.answer_engine.config import settings

PACKAGE_DIR = Path(__file__).resolve().parent / "backend" / "answer_engine"


def main() -> None:
    uvicorn.run(
        "backend.answer_engine.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_reload,
        reload_dirs=[str(PACKAGE_DIR)] if settings.app_reload else None,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
