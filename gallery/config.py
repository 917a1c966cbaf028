"""
Process configuration for the gallery, read once from the environment.
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

DEFAULT_REGION = "us-east-1"
DEFAULT_ENDPOINT = "https://s3.bitiful.net"
DEFAULT_TITLE = "Multiverse by HTML5 UP"
DEFAULT_IMAGE_EXTENSIONS = ("jpg", "jpeg", "png", "gif", "bmp", "webp")
DEFAULT_URL_EXPIRY_SECONDS = 3600

# (env var, label, icon class, default URL)
SOCIAL_LINK_SOURCES = (
    ("TELEGRAM_URL", "Telegram", "icon fa-telegram", "https://t.me/imsunpw"),
    ("TWITTER_URL", "Twitter", "icon fa-twitter", "#"),
    ("FACEBOOK_URL", "Facebook", "icon fa-facebook", "#"),
    ("INSTAGRAM_URL", "Instagram", "icon fa-instagram", "#"),
    ("GITHUB_URL", "GitHub", "icon fa-github", "https://github.com/jkjoy"),
    ("DRIBBBLE_URL", "Dribbble", "icon fa-dribbble", "#"),
    ("LINKEDIN_URL", "LinkedIn", "icon fa-linkedin", "#"),
    (
        "MASTODON_URL",
        "Mastodon",
        "icon fa-brands fa-mastodon",
        "https://jiong.us/@sun",
    ),
)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigurationError(Exception):
    """Raised when an environment value cannot be turned into a setting."""


class SocialLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    icon: str
    url: str


class PageSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = DEFAULT_TITLE
    section_description: str = DEFAULT_TITLE
    footer_title: str = "Footer Title"
    footer_text: str = "Footer Text"
    social_links: tuple[SocialLink, ...] = ()


class Settings(BaseModel):
    """
    Immutable gallery configuration.

    Built once at startup and handed to the storage factory and the
    image functions; nothing below this layer looks at os.environ.
    """

    model_config = ConfigDict(frozen=True)

    s3_region: str = DEFAULT_REGION
    s3_endpoint: str = DEFAULT_ENDPOINT
    s3_access_key: str = ""
    s3_secret_key: str = ""
    s3_bucket_name: str = ""
    s3_prefix: str = ""
    s3_verify_ssl: bool = True
    cdn_domain: str = ""
    image_extensions: frozenset[str] = frozenset(DEFAULT_IMAGE_EXTENSIONS)
    url_expiry_seconds: int = DEFAULT_URL_EXPIRY_SECONDS
    page: PageSettings = PageSettings()


def _get(environ: Mapping[str, str], name: str, default: str = "") -> str:
    # Empty values fall back to the default, same as unset ones
    return environ.get(name) or default


def _parse_bool(name: str, raw: str, *, default: bool) -> bool:
    if not raw:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    error_message = f"{name} must be a boolean, got {raw!r}"
    raise ConfigurationError(error_message)


def _parse_expiry(raw: str) -> int:
    if not raw:
        return DEFAULT_URL_EXPIRY_SECONDS
    try:
        seconds = int(raw)
    except ValueError as exc:
        error_message = f"S3_URL_EXPIRY must be an integer, got {raw!r}"
        raise ConfigurationError(error_message) from exc
    if seconds <= 0:
        error_message = f"S3_URL_EXPIRY must be positive, got {seconds}"
        raise ConfigurationError(error_message)
    return seconds


def parse_extensions(raw: str) -> frozenset[str]:
    """
    Turn a comma-separated list such as "JPG, .png" into {"jpg", "png"}.
    """
    if not raw:
        return frozenset(DEFAULT_IMAGE_EXTENSIONS)
    extensions = {
        item.strip().lstrip(".").lower() for item in raw.split(",") if item.strip()
    }
    return frozenset(ext for ext in extensions if ext)


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ; callers are
            expected to have run load_dotenv() beforehand.

    Raises:
        ConfigurationError: if a value is present but malformed.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    title = _get(env, "TITLE", DEFAULT_TITLE)
    page = PageSettings(
        title=title,
        section_description=_get(env, "SECTION_DESCRIPTION", DEFAULT_TITLE),
        footer_title=_get(env, "FOOTER_TITLE", "Footer Title"),
        footer_text=_get(env, "FOOTER_TEXT", "Footer Text"),
        social_links=tuple(
            SocialLink(name=label, icon=icon, url=_get(env, var, default))
            for var, label, icon, default in SOCIAL_LINK_SOURCES
        ),
    )
    return Settings(
        s3_region=_get(env, "S3_REGION", DEFAULT_REGION),
        s3_endpoint=_get(env, "S3_ENDPOINT", DEFAULT_ENDPOINT),
        s3_access_key=_get(env, "S3_ACCESS_KEY"),
        s3_secret_key=_get(env, "S3_SECRET_KEY"),
        s3_bucket_name=_get(env, "S3_BUCKET_NAME"),
        s3_prefix=_get(env, "S3_PREFIX"),
        s3_verify_ssl=_parse_bool(
            "S3_VERIFY_SSL", _get(env, "S3_VERIFY_SSL"), default=True
        ),
        cdn_domain=_get(env, "CDN_DOMAIN"),
        image_extensions=parse_extensions(_get(env, "IMAGE_EXTENSIONS")),
        url_expiry_seconds=_parse_expiry(_get(env, "S3_URL_EXPIRY")),
        page=page,
    )
