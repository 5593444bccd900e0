"""Deployer configuration loaded from WSKPACK_* environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from wskpack.deployer.models.enums import DedupMode, JavaGuard

DEFAULT_DOCKER_IMAGE = "openwhisk/dockerskeleton"


class WskpackSettings(BaseSettings):
    """Deployer settings.

    All fields are read from environment variables with the ``WSKPACK_``
    prefix.  For example, ``WSKPACK_LOG_LEVEL=DEBUG`` maps to ``log_level``.
    """

    model_config = SettingsConfigDict(
        env_prefix="WSKPACK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"
    log_json: bool = False
    """Emit log records as JSON lines on stderr instead of the coloured format."""

    # -- Runtime resolution ----------------------------------------------------
    docker_skeleton_image: str = DEFAULT_DOCKER_IMAGE
    """Image used for docker actions shipped as a zip bundle."""

    java_guard: JavaGuard = JavaGuard.LITERAL
    """Kinds that require an explicit main class.

    ``literal`` keeps the historical behaviour where only the bare ``java``
    kind is checked, so ``.jar`` artifacts resolved to ``java:default`` pass
    without a main class.
    """

    # -- Web annotations -------------------------------------------------------
    web_annotation_dedup: DedupMode = DedupMode.FIRST
    """``first`` strips one occurrence per web key, ``all`` strips every one."""


def get_settings() -> WskpackSettings:
    """Return a cached settings instance.

    Call ``_get_settings_cached.cache_clear()`` in tests to force a re-read
    after overriding env vars.
    """
    return _get_settings_cached()


@lru_cache(maxsize=1)
def _get_settings_cached() -> WskpackSettings:
    return WskpackSettings()
