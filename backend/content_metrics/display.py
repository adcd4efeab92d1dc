"""Dashboard widget that shows the number of records per content type.

A ``MetricsDisplay`` is one mount of the widget: it starts in LOADING,
fetches once, and settles in ERROR, EMPTY or POPULATED for good.
"""
import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Dict, List, Mapping, Optional, Tuple

from asgiref.sync import async_to_sync, sync_to_async
from django.template.loader import render_to_string

from .constants import EMPTY_MESSAGE, GENERIC_ERROR_MESSAGE, WIDGET_ID, WIDGET_TITLE_DEFAULT
from .counts import Count, CountValue, Immediate, format_count, resolve_count
from .services import get_aggregator

logger = logging.getLogger(__name__)

MetricsSource = Callable[[], Awaitable[Optional[Mapping[str, Count]]]]


class WidgetState(str, Enum):
    LOADING = 'loading'
    ERROR = 'error'
    EMPTY = 'empty'
    POPULATED = 'populated'


async def normalize_metrics(data: Optional[Mapping[str, Count]]) -> Dict[str, CountValue]:
    """Resolve every count, keeping the response order of the entries."""
    if not data:
        return {}
    items = list(data.items())
    values = await asyncio.gather(*(resolve_count(count) for _, count in items))
    return {name: value for (name, _), value in zip(items, values)}


class MetricsDisplay:
    template_name = 'content_metrics/widget.html'

    def __init__(self, fetch: MetricsSource):
        self.fetch = fetch
        self.state = WidgetState.LOADING
        self.metrics: Optional[Dict[str, CountValue]] = None
        self.error: Optional[str] = None
        self._started = False

    async def load(self) -> WidgetState:
        # One fetch per mount; re-rendering never re-fetches.
        if self._started:
            return self.state
        self._started = True

        try:
            data = await self.fetch()
            metrics = await normalize_metrics(data)
        except Exception as exc:
            logger.error('Failed to load content metrics: %s', exc, exc_info=True)
            self.error = str(exc) or GENERIC_ERROR_MESSAGE
            self.state = WidgetState.ERROR
            return self.state

        self.metrics = metrics
        self.state = WidgetState.POPULATED if metrics else WidgetState.EMPTY
        return self.state

    @property
    def rows(self) -> List[Tuple[str, str]]:
        return [(str(name), format_count(value)) for name, value in (self.metrics or {}).items()]

    def get_context_data(self, **kwargs) -> Dict:
        context = {
            'widget_id': WIDGET_ID,
            'title': WIDGET_TITLE_DEFAULT,
            'state': self.state.value,
            'rows': self.rows,
            'empty_message': EMPTY_MESSAGE,
        }
        context.update(kwargs)
        return context

    def render(self, request=None, **kwargs) -> str:
        return render_to_string(self.template_name, self.get_context_data(**kwargs), request=request)


async def fetch_local_counts() -> Dict[str, Count]:
    """Metrics source that runs the aggregator in-process."""
    counts = await sync_to_async(get_aggregator().get_content_counts)()
    return {name: Immediate(value) for name, value in counts.items()}


def render_metrics_widget(request=None, widget=None) -> str:
    display = MetricsDisplay(fetch_local_counts)
    async_to_sync(display.load)()
    extra = {'title': widget.title.text} if widget is not None else {}
    return display.render(request, **extra)


__all__ = ['MetricsDisplay', 'WidgetState', 'fetch_local_counts', 'normalize_metrics', 'render_metrics_widget']
