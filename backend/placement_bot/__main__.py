import uvicorn

from placement_bot.config import get_settings


def main() -> None:
    """Run the API server on the configured host/port."""
    settings = get_settings()
    uvicorn.run(
        "placement_bot.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
