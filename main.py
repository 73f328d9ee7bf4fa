import asyncio
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from config import ConfigError, load_config, settings
from services import PageFetcher, WebhookNotifier, run_monitors
from services.http import create_session

logger = logging.getLogger("stockmonitor")


# ensure logs are recorded both to stdout and to a rotating file
def configure_logging() -> None:
    log_dir = Path(os.getenv("LOG_DIR", "logs"))
    if not log_dir.is_absolute():
        log_dir = Path.cwd() / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "monitor.log"

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        handlers=[
            logging.StreamHandler(),
            RotatingFileHandler(
                log_file,
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            ),
        ],
        force=True,
    )


async def main() -> None:
    config = load_config(settings.CONFIG_PATH)

    for site in config.websites:
        logger.info("Configured site:\n%s", site)

    async with create_session() as session:
        fetcher = PageFetcher(session)
        notifier = WebhookNotifier(session, config.webhook)
        logger.info(
            "Monitoring %s website(s), cold start notifications %s",
            len(config.websites),
            "enabled" if settings.COLD_START_NOTIFY else "disabled",
        )
        await run_monitors(
            config,
            fetcher,
            notifier,
            cold_start_notify=settings.COLD_START_NOTIFY,
        )


def cli() -> None:
    configure_logging()
    try:
        settings.reload()
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Monitor stopped by user")
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        sys.exit(1)
    except ValueError as exc:
        logger.error("Invalid settings: %s", exc)
        sys.exit(1)


if __name__ == "__main__":
    cli()
