"""
Refresh Scheduler

Runs a job once immediately and then on a fixed interval on a background
worker thread. The host that owns the display surface owns the scheduler
and decides when to start and stop it.

Usage:
    scheduler = RefreshScheduler(lambda: refresh_leaderboard(page))
    scheduler.start()
    ...
    scheduler.stop()
"""

import threading
from typing import Callable

from leaderboard.config import REFRESH_INTERVAL_SECONDS
from leaderboard.errors import SchedulerError
from leaderboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class RefreshScheduler:
    """
    Fixed-interval job runner.

    Args:
        job: Callable run on every tick
        interval_seconds: Delay between the end of one run and the start of the next
    """

    def __init__(self, job: Callable[[], object], interval_seconds: float = REFRESH_INTERVAL_SECONDS):
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval_seconds}")
        self.job = job
        self.interval_seconds = interval_seconds
        self.run_count = 0
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the worker; the first run happens straight away."""
        if self._thread is not None:
            if self._thread.is_alive():
                raise SchedulerError("Scheduler already started or previous worker still exiting")
            self._thread = None
        # Fresh event per worker so a restart never wakes a stopped one
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run, args=(self._stop_event,), name="leaderboard-refresh", daemon=True
        )
        self._thread.start()
        logger.info(f"Refresh scheduler started (every {self.interval_seconds}s)")

    def stop(self, timeout: float | None = None) -> bool:
        """
        Signal the worker to exit and wait for it. No-op if not started.

        Returns:
            True if the worker has exited, False if it is still finishing a run
            after the timeout (start() refuses to run until it has)
        """
        if self._thread is None:
            return True
        self._stop_event.set()
        self._thread.join(timeout)
        if self._thread.is_alive():
            logger.warning("Refresh worker still running after stop timeout")
            return False
        self._thread = None
        logger.info("Refresh scheduler stopped")
        return True

    def wait(self) -> None:
        """Block until the scheduler is stopped from another thread."""
        while not self._stop_event.wait(1.0):
            pass

    def _run(self, stop_event: threading.Event) -> None:
        while True:
            self._run_job()
            if stop_event.wait(self.interval_seconds):
                break

    def _run_job(self) -> None:
        try:
            self.job()
        except Exception as e:
            logger.exception(f"Scheduled refresh raised: {e}")
        finally:
            self.run_count += 1
