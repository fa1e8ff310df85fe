"""Helpers for the AI pacing delay and play-time bookkeeping."""

import time


def deadline_after(seconds):
    return time.time() + seconds


def time_remaining(deadline):
    return max(0.0, deadline - time.time())


def wait_until(deadline):
    remaining = time_remaining(deadline)
    if remaining > 0:
        time.sleep(remaining)
