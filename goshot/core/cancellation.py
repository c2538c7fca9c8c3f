# Cooperative cancellation driven by OS interrupt signals
import logging
import os
import signal
import threading
from typing import Callable, Dict, Optional

from .errors import CaptureCancelled

logger = logging.getLogger(__name__)


class CancellationToken:  # One-shot stop flag, set once and read many times

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise CaptureCancelled()


class SignalCancellationSource:
    """Flip a CancellationToken on the first interrupt, exit hard on the second.

    Use as a context manager around the work that should observe the token.
    Previous signal handlers are restored on exit.
    """

    def __init__(
        self,
        token: CancellationToken,
        signals: Optional[tuple] = None,
        hard_exit: Callable[[int], None] = os._exit,
    ):
        self.token = token
        self.signals = signals if signals is not None else self._default_signals()
        self.hard_exit = hard_exit
        self.signal_count = 0
        self._previous: Dict[int, object] = {}

    @staticmethod
    def _default_signals() -> tuple:
        sigs = [signal.SIGINT]
        sigterm = getattr(signal, "SIGTERM", None)
        if sigterm is not None:
            sigs.append(sigterm)
        return tuple(sigs)

    def _handle_signal(self, signum, _frame) -> None:
        self.signal_count += 1
        if self.signal_count == 1:
            logger.warning(f"Received signal {signum}, stopping after the current display (repeat to force exit)")
            self.token.cancel()
            return

        logger.warning(f"Received signal {signum} again, exiting immediately")
        self.hard_exit(1)

    def start(self) -> None:
        if self._previous:
            return
        for sig in self.signals:
            self._previous[sig] = signal.getsignal(sig)
            signal.signal(sig, self._handle_signal)
        logger.debug(f"Listening for signals: {[int(s) for s in self.signals]}")

    def stop(self) -> None:
        for sig, handler in self._previous.items():
            signal.signal(sig, handler if handler is not None else signal.SIG_DFL)
        self._previous.clear()

    def __enter__(self) -> "SignalCancellationSource":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
