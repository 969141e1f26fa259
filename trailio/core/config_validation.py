import base64

import orjson

from trailio.core.models import ConfigModel, StreamConfig, default_config, settings


def config_check(b64config: str):
    if not b64config:
        return dict(default_config)

    try:
        padded = b64config + "=" * (-len(b64config) % 4)
        config = orjson.loads(base64.urlsafe_b64decode(padded).decode())

        validated_config = ConfigModel(**config)
        return validated_config.model_dump()
    except Exception:
        return dict(default_config)  # if it doesn't pass, return default config


def apply_query_overrides(config: dict, query_params):
    overrides = {
        key: query_params[key]
        for key in ("tmdbApiKey", "language", "serpApiKey")
        if query_params.get(key)
    }
    if not overrides:
        return config

    return ConfigModel(**{**config, **overrides}).model_dump()


def build_stream_config(config: dict):
    return StreamConfig(
        tmdb_api_key=config["tmdbApiKey"] or settings.TMDB_API_KEY,
        language=config["language"] or settings.TMDB_LANGUAGE,
        serp_api_key=config["serpApiKey"] or settings.SERPAPI_KEY,
        categories=config["categories"],
    )
