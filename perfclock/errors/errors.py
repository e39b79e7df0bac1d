# --- Clock ---


class ClockUnavailable(RuntimeError):
    """
    Raised when the host time primitive cannot produce a reading.

    The host exception is kept as __cause__. Callers must not substitute a default
    timestamp (e.g. 0.0).
    """


# --- Demos ----


class DemoConfigError(ValueError):
    "Invalid FizzBuzz demo configuration (empty range, non-positive divisor)."
