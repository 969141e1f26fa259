import re

_BRACKETED = re.compile(r"\[[^\]]*\]")
_WHITESPACE = re.compile(r"\s+")


def clean_video_title(title: str):
    if not title:
        return ""

    title = _BRACKETED.sub("", title)
    return _WHITESPACE.sub(" ", title).strip()


def parse_duration(value) -> int:
    """Convert ``hh:mm:ss``, ``mm:ss`` or ``ss`` into seconds.

    Missing or unreadable components count as zero.
    """
    if isinstance(value, int):
        return value

    if not value or not isinstance(value, str):
        return 0

    seconds = 0
    for part in value.strip().split(":"):
        seconds *= 60
        try:
            seconds += int(part)
        except ValueError:
            pass

    return seconds


def format_media_title(title: str, year: str):
    if not title:
        return ""

    if year:
        return f"{title} ({year})"
    return title


def format_stream_label(prefix: str, title: str, year: str, video_title: str):
    video_title = clean_video_title(video_title)
    headline = format_media_title(title, year) or video_title

    label = f"{prefix}: {headline}" if headline else prefix
    if video_title and video_title != headline:
        label += f"\n{video_title}"

    return label
