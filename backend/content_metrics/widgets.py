from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Union

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string
from django.utils.translation import gettext


@dataclass(frozen=True)
class WidgetTitle:
    id: str
    default_message: str

    @property
    def text(self) -> str:
        return gettext(self.default_message)


@dataclass
class Widget:
    id: str
    title: WidgetTitle
    # Dotted path is imported on first render.
    component: Union[str, Callable]
    plugin_id: str
    icon: Optional[str] = None

    def get_component(self) -> Callable:
        if isinstance(self.component, str):
            self.component = import_string(self.component)
        return self.component

    def render(self, request=None) -> str:
        return self.get_component()(request, widget=self)


class WidgetRegistry:
    """Widgets shown on the admin index dashboard, in registration order."""

    def __init__(self):
        self._widgets: Dict[str, Widget] = {}

    def register(self, id: str, title: WidgetTitle, component: Union[str, Callable], plugin_id: str, icon: Optional[str] = None) -> Widget:
        if id in self._widgets:
            raise ImproperlyConfigured(f'Dashboard widget {id!r} is already registered')
        widget = Widget(id=id, title=title, component=component, plugin_id=plugin_id, icon=icon)
        self._widgets[id] = widget
        return widget

    def unregister(self, id: str) -> None:
        self._widgets.pop(id, None)

    def is_registered(self, id: str) -> bool:
        return id in self._widgets

    def get(self, id: str) -> Optional[Widget]:
        return self._widgets.get(id)

    def all(self) -> List[Widget]:
        return list(self._widgets.values())


widgets = WidgetRegistry()
