RECOGNIZED_SITE = "YouTube"

YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={key}"

NATIVE_ID_PREFIX = "tmdb:"
IMDB_ID_PREFIX = "imdb_id:"

SUPPORTED_KINDS = ("movie", "series")
