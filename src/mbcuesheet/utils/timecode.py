"""
Cue sheet timecode conversion.

Cue sheets address audio in MM:SS:FF, where FF counts CD frames and there
are seventy five frames to one second.
"""

FRAMES_PER_SECOND = 75
SECONDS_PER_MINUTE = 60
MS_PER_SECOND = 1000


def ms_to_frames(total_ms: int) -> int:
    """
    Convert milliseconds to the nearest whole number of CD frames.

    Rounds half up using integer arithmetic, so 999 ms is 75 frames
    (one full second) rather than a 75th frame within second zero.
    """
    return (total_ms * FRAMES_PER_SECOND + MS_PER_SECOND // 2) // MS_PER_SECOND


def to_timecode(total_ms: int) -> str:
    """
    Format a millisecond offset as an MM:SS:FF cue sheet timecode.

    Minutes are not wrapped; offsets of 100 minutes or more produce
    three digit minute fields.

    Args:
        total_ms: Non-negative offset in milliseconds

    Returns:
        Zero-padded ``MM:SS:FF`` string

    Raises:
        ValueError: If total_ms is negative or not an integer
    """
    if isinstance(total_ms, bool) or not isinstance(total_ms, int):
        raise ValueError(f"total_ms must be an integer, got {total_ms!r}")
    if total_ms < 0:
        raise ValueError(f"total_ms must be non-negative, got {total_ms}")

    minutes, remainder = divmod(ms_to_frames(total_ms), FRAMES_PER_SECOND * SECONDS_PER_MINUTE)
    seconds, frames = divmod(remainder, FRAMES_PER_SECOND)

    return f"{minutes:02d}:{seconds:02d}:{frames:02d}"
