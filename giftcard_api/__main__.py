"""Run the service: ``python -m giftcard_api``."""
import uvicorn

from giftcard_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "giftcard_api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
