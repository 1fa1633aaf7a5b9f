import datetime
import logging
import time


class DeltaTimeFormatter(logging.Formatter):
    """Log the time relative to a reference time. The formatter adds an
    attribute `delta` to each :class:`.logging.LogRecord`, which can be used
    in the format string. The reference time defaults to the time of creation
    of the formatter.

    >>> import logging, sys
    >>> logger = logging.getLogger('setlogic.demo')
    >>> stream_handler = logging.StreamHandler(stream=sys.stdout)
    >>> formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> stream_handler.setFormatter(formatter)
    >>> logger.addHandler(stream_handler)
    >>> logger.warning('checking (A ∩ B)')  # doctest: +SKIP
    0:00:00.001: checking (A ∩ B)
    >>> logger.removeHandler(stream_handler)
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.reference_time = time.time()

    def format(self, record: logging.LogRecord) -> str:
        delta = datetime.timedelta(seconds=max(0.0, record.created - self.reference_time))
        record.delta = str(delta)[:-3] if delta.microseconds else f'{delta}.000'
        return super().format(record)

    def get_reference_time(self) -> float:
        """Get the reference time in seconds since the :ref:`epoch <epoch>`.
        This is compatible with the output of :func:`.time.time`.
        """
        return self.reference_time

    def set_reference_time(self, reference_time: float) -> None:
        """Set the reference time to `reference_time` seconds since the
        :ref:`epoch <epoch>`.
        """
        self.reference_time = reference_time


class RateFilter(logging.Filter):
    """Let a record pass only if at least `rate` seconds have passed since the
    last record that passed. Records at level WARNING and above always pass.
    With rate 0.0 the filter lets everything pass.

    >>> import logging
    >>> f = RateFilter(rate=3600.0)
    >>> record = logging.LogRecord('x', logging.INFO, __file__, 0, 'row', None, None)
    >>> f.filter(record)
    True
    >>> f.filter(record)
    False
    >>> f.off()
    >>> f.filter(record)
    True
    """

    def __init__(self, rate: float = 0.0) -> None:
        super().__init__()
        self.active = True
        self.last_log = float('-inf')
        self.rate = rate

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.active or record.levelno >= logging.WARNING:
            return True
        now = time.time()
        if now - self.last_log >= self.rate:
            self.last_log = now
            return True
        return False

    def off(self) -> None:
        """Turn filter off.
        """
        self.active = False

    def on(self) -> None:
        """Turn filter on.
        """
        self.active = True

    def set_rate(self, rate: float) -> None:
        """Set the log rate to `rate` seconds.
        """
        self.rate = rate


class Timer:
    """A simple timer measuring the wall time in seconds relative to the last
    :meth:`.reset`. Instances are implicitly reset when they are created.

    >>> timer = Timer()
    >>> timer.get() >= 0.0
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        """Get the wall time since last :meth:`.reset` in seconds.
        """
        return time.time() - self._reference_time

    def reset(self) -> None:
        """Reset the timer to 0.0 seconds.
        """
        self._reference_time = time.time()
