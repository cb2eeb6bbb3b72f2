"""
Main entry point for the Price Alert Bot application.

Initializes components, starts the status server, announces the current
price once at startup and then checks the price on a fixed schedule.
"""

import asyncio
import logging
import signal # For graceful shutdown

# settings loads the project .env on import
from config import settings
from pricealert.api import CoinGeckoPriceFetcher, TwilioMessenger
from pricealert.services import IntervalScheduler, PriceWatcher, StatusServer
from pricealert.utils import setup_logging

# Setup logging as early as possible
setup_logging(level=settings.LOG_LEVEL, log_to_file=settings.LOG_TO_FILE, log_filename=settings.LOG_FILENAME)

logger = logging.getLogger(__name__)

shutdown_event = asyncio.Event()

def handle_shutdown_signal(sig, frame=None):
    """Sets the shutdown event when a signal is received."""
    logger.warning(f"Received signal {sig}. Initiating graceful shutdown...")
    shutdown_event.set()


def install_signal_handlers():
    """Routes SIGINT/SIGTERM through the running loop so waits wake up immediately."""
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, handle_shutdown_signal, sig)
        except NotImplementedError:
            # Windows event loops have no add_signal_handler
            signal.signal(sig, handle_shutdown_signal)


def build_watcher() -> PriceWatcher:
    """Wires the price watcher to its price source and notifier from settings."""
    return PriceWatcher(
        price_source=CoinGeckoPriceFetcher(),
        notifier=TwilioMessenger(),
        asset_id=settings.ASSET_ID,
        asset_name=settings.ASSET_NAME,
        interval_minutes=settings.CHECK_INTERVAL_MINUTES,
    )


async def main_runner(stop_event: asyncio.Event = shutdown_event):
    """Main asynchronous execution function."""
    status_server = None
    scheduler = None
    schedule_task = None

    try:
        watcher = build_watcher()

        # --- Status server ---
        status_server = StatusServer(
            asset_id=settings.ASSET_ID,
            interval_minutes=settings.CHECK_INTERVAL_MINUTES,
            host=settings.HOST,
            port=settings.PORT,
        )
        await status_server.start()

        # --- Schedule ---
        scheduler = IntervalScheduler(watcher.on_tick, settings.CHECK_INTERVAL_MINUTES)
        schedule_task = asyncio.create_task(scheduler.run(stop_event))
        logger.info(f"Price check scheduled: every {settings.CHECK_INTERVAL_MINUTES} minute(s)")

        # --- Startup announcement ---
        await watcher.on_startup()

        await stop_event.wait()

    except asyncio.CancelledError:
        logger.info("Main runner task cancelled.")
    except Exception:
        logger.exception("Unhandled exception in main_runner:")
    finally:
        logger.info("Initiating shutdown...")
        stop_event.set() # Ensure event is set for all tasks

        if schedule_task is not None:
            await asyncio.gather(schedule_task, return_exceptions=True)
        if scheduler is not None:
            await scheduler.wait_for_running()
        if status_server is not None:
            await status_server.stop()

        logger.info("Shutdown complete.")


async def run_with_signals():
    install_signal_handlers()
    await main_runner()


def main():
    logger.info("Starting Price Alert Bot...")
    try:
        asyncio.run(run_with_signals())
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught in main.")
    except Exception as e:
        logger.critical(f"Critical error preventing startup: {e}", exc_info=True)

    logger.info("Price Alert Bot finished.")


if __name__ == "__main__":
    main()
