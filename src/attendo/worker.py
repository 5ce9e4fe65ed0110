"""Background worker: nightly plan precomputation."""

import logging
from datetime import date

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from .config import Config, load_config
from .workflows import Services, build_services, precompute_plans

logger = logging.getLogger(__name__)


def run_precompute(services: Services) -> None:
    """Scheduled job body. Failures are logged so the scheduler keeps running."""
    logger.info("Running nightly plan precomputation")
    try:
        precompute_plans(services, today=date.today())
    except Exception as e:
        logger.error(f"Plan precomputation failed: {e}")


def setup_scheduler(services: Services, config: Config | None = None) -> BlockingScheduler:
    """Set up the nightly precompute job."""
    config = config or services.config

    scheduler = BlockingScheduler(timezone=config.timezone or "Asia/Kolkata")

    try:
        hour, minute = map(int, config.precompute_time.split(":"))
    except ValueError:
        raise ValueError(f"Invalid PRECOMPUTE_TIME format: {config.precompute_time}") from None

    scheduler.add_job(
        run_precompute,
        CronTrigger(hour=hour, minute=minute),
        args=[services],
        id="precompute_plans",
    )
    logger.info(f"Scheduled plan precomputation at {hour:02d}:{minute:02d}")
    return scheduler


def run_worker():
    """Run the background worker until interrupted."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )

    config = load_config()
    services = build_services(config)
    scheduler = setup_scheduler(services, config)

    logger.info("Starting Attendo worker...")
    scheduler.start()
