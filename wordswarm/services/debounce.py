"""Debounced word checks."""

from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, QTimer

from wordswarm.services.logs import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

logger = get_logger(__name__)


class WordCheckScheduler(QObject):
    """
    Single-shot timer that checks a sequence once typing has paused.

    Only one check is ever pending: triggering again replaces the pending
    check, whichever sequence it was for.

    Args:
        check_callback: Function to call with the sequence ID when the delay
            elapses
        debounce_ms: Debounce delay in milliseconds

    """

    def __init__(
        self,
        check_callback: "Callable[[int], object]",
        debounce_ms: int = 1500,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        #: The function to call when the delay elapses.
        self.check_callback = check_callback
        #: The debounce delay in milliseconds.
        self.debounce_ms = debounce_ms
        #: The timer for the debounce.
        self._timer: QTimer | None = None
        #: The sequence the pending check is for.
        self._pending_sequence_id: int | None = None

    @property
    def is_pending(self) -> bool:
        return self._pending_sequence_id is not None

    @property
    def pending_sequence_id(self) -> int | None:
        return self._pending_sequence_id

    def trigger(self, sequence_id: int) -> None:
        """
        Schedule a check of ``sequence_id``, cancelling any pending check.

        Args:
            sequence_id: The sequence to check

        """
        self._pending_sequence_id = sequence_id
        self._stop_timer()
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._check)
        self._timer.start(self.debounce_ms)

    def _check(self) -> None:
        """
        Run the pending check.

        This method is either called by the timer when the debounce delay has
        elapsed or by :meth:`check_now`.  The pending state is cleared before
        the callback runs so that the callback may trigger a new check.  If the
        callback raises, the error is logged and the frame loop carries on.
        """
        sequence_id = self._pending_sequence_id
        self._pending_sequence_id = None
        self._stop_timer()
        if sequence_id is None:
            return
        try:
            self.check_callback(sequence_id)
        except Exception:  # noqa: BLE001
            logger.exception("word.check.failed", sequence_id=sequence_id)

    def check_now(self) -> None:
        """
        Run the pending check immediately, bypassing the debounce.  Does
        nothing when no check is pending.
        """
        self._check()

    def cancel(self) -> None:
        """
        Cancel the pending check, meaning the timer is stopped and the callback
        is not called.
        """
        self._stop_timer()
        self._pending_sequence_id = None

    def _stop_timer(self) -> None:
        if self._timer:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None
