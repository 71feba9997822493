"""Run the service with ``python -m chat_playground``."""

import uvicorn

from chat_playground.config import settings


def main() -> None:
    uvicorn.run("chat_playground.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
