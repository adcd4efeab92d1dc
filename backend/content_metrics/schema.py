"""Read-only access to the live content-type registry.

Content types are addressed by a uid of the form
``<namespace>::<app_label>.<model_name>``. Models of the project's own apps
land in the user namespace (``api::`` by default); Django contrib apps,
third-party apps and this plugin land in ``plugin::``.
"""
from typing import Dict, List, Optional, Protocol

from django.apps import apps as django_apps
from django.utils.text import capfirst

from .conf import get_setting
from .constants import SYSTEM_NAMESPACE
from .exceptions import UnknownContentType


class SchemaProvider(Protocol):
    def list_uids(self) -> List[str]:
        ...

    def get_info(self, uid: str) -> Dict[str, str]:
        ...


def is_user_content(uid: str) -> bool:
    return uid.startswith(get_setting('USER_NAMESPACE'))


class DjangoSchemaProvider:
    """Schema provider over Django's application registry.

    The registry is read on every call so that apps and models registered
    after construction are picked up.
    """

    def __init__(self, app_registry=None):
        self.app_registry = app_registry or django_apps

    def _namespace_for(self, app_config) -> str:
        prefixes = get_setting('SYSTEM_APP_PREFIXES') or []
        if any(app_config.name.startswith(p) for p in prefixes):
            return SYSTEM_NAMESPACE
        return get_setting('USER_NAMESPACE')

    def _models_by_uid(self) -> Dict[str, type]:
        models_by_uid = {}
        for model in self.app_registry.get_models():
            namespace = self._namespace_for(model._meta.app_config)
            models_by_uid[f'{namespace}{model._meta.label_lower}'] = model
        return models_by_uid

    def list_uids(self) -> List[str]:
        return list(self._models_by_uid())

    def get_model(self, uid: str) -> type:
        _, sep, label = uid.partition('::')
        app_label, dot, model_name = label.partition('.')
        if not sep or not dot:
            raise UnknownContentType(uid)
        try:
            model: Optional[type] = self.app_registry.get_model(app_label, model_name)
        except LookupError:
            model = None
        # The namespace is part of the uid: 'api::auth.user' does not exist.
        if model is None or f'{self._namespace_for(model._meta.app_config)}{model._meta.label_lower}' != uid:
            raise UnknownContentType(uid)
        return model

    def get_info(self, uid: str) -> Dict[str, str]:
        model = self.get_model(uid)
        opts = model._meta
        display_name = getattr(model, 'content_metrics_display_name', None) or capfirst(opts.verbose_name)
        return {'displayName': str(display_name or '')}


__all__ = ['SchemaProvider', 'DjangoSchemaProvider', 'is_user_content']
