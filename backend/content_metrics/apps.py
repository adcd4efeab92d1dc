from django.apps import AppConfig


class ContentMetricsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'content_metrics'
    verbose_name = 'Content Metrics'

    def ready(self):
        from .constants import PLUGIN_ID, WIDGET_ID, WIDGET_TITLE_DEFAULT, WIDGET_TITLE_KEY
        from .widgets import WidgetTitle, widgets

        if not widgets.is_registered(WIDGET_ID):
            widgets.register(
                id=WIDGET_ID,
                title=WidgetTitle(id=WIDGET_TITLE_KEY, default_message=WIDGET_TITLE_DEFAULT),
                component='content_metrics.display.render_metrics_widget',
                plugin_id=PLUGIN_ID,
                icon='stethoscope',
            )
