import time


def current_epoch_ms() -> int:
    """Wall-clock time in epoch milliseconds, the unit used by every lifecycle timestamp"""
    return int(time.time() * 1000)
