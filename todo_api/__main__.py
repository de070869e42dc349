"""Run the service: python -m todo_api"""

import uvicorn

from todo_api.config import get_settings


def main() -> None:
    settings = get_settings()
    # log_config=None: uvicorn's loggers propagate to the handler setup_logging installs
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
