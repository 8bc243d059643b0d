"""Kernel time – Clock port + implementations."""
from mp_auth.kernel.time.clock import Clock, FrozenClock, SystemClock, start_of_day_utc, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "start_of_day_utc", "utc_now"]
