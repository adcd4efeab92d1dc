from typing import Any

from django.conf import settings


DEFAULTS = {
    'USER_NAMESPACE': 'api::',
    'SYSTEM_APP_PREFIXES': ['django.', 'rest_framework', 'corsheaders', 'content_metrics'],
    'CLIENT_TIMEOUT_SECONDS': 10.0,
}


def get_setting(name: str) -> Any:
    """Read a key of the ``CONTENT_METRICS`` setting, falling back to DEFAULTS."""
    overrides = getattr(settings, 'CONTENT_METRICS', None) or {}
    return overrides.get(name, DEFAULTS[name])
