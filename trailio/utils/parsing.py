from trailio.core.constants import IMDB_ID_PREFIX, NATIVE_ID_PREFIX


def _parse_optional_int(value: str):
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_media_id(media_id: str):
    """Split ``id[:season:episode]`` into its parts.

    Native ids keep their ``tmdb:`` prefix, so ``tmdb:278:1:2`` yields
    ``("tmdb:278", 1, 2)``.
    """
    media_id = media_id.removeprefix(IMDB_ID_PREFIX)

    prefix = ""
    if media_id.startswith(NATIVE_ID_PREFIX):
        prefix = NATIVE_ID_PREFIX
        media_id = media_id[len(NATIVE_ID_PREFIX) :]

    info = media_id.split(":")
    base_id = f"{prefix}{info[0]}"
    season = _parse_optional_int(info[1]) if len(info) > 1 else None
    episode = _parse_optional_int(info[2]) if len(info) > 2 else None
    return base_id, season, episode


def split_language(language: str):
    """Return the lower-case language part and upper-case region of a tag."""
    if not language:
        return "en", None

    parts = language.replace("_", "-").split("-")
    lang = parts[0].lower() or "en"
    region = parts[1].upper() if len(parts) > 1 and parts[1] else None
    return lang, region
