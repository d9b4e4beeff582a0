"""Elapsed time formatting."""


def format_elapsed(seconds: float) -> str:
    """Format a duration the way the console reports it (e.g. ``12.3ms``, ``1.52s``)."""
    if seconds < 0:
        seconds = 0.0
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f}µs"
    if seconds < 1:
        return f"{seconds * 1e3:.1f}ms"
    if seconds < 60:
        return f"{seconds:.2f}s"
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}m{rest:.1f}s"
