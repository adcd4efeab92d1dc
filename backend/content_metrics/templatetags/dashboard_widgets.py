from django import template
from django.utils.safestring import mark_safe

from content_metrics.widgets import widgets

register = template.Library()


@register.simple_tag(takes_context=True)
def render_dashboard_widgets(context):
    """Render every registered dashboard widget, in registration order."""
    request = context.get('request')
    return mark_safe(''.join(widget.render(request) for widget in widgets.all()))
