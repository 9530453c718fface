from __future__ import annotations

import uvicorn

from user_registry.logging_config import configure_logging
from user_registry.settings import get_settings


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(
        "user_registry.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
