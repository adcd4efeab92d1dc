from unittest import mock

from django.contrib.auth import get_user_model
from django.core.exceptions import ImproperlyConfigured
from django.test import SimpleTestCase, TestCase

from cms.models import Article
from content_metrics.display import render_metrics_widget
from content_metrics.widgets import WidgetRegistry, WidgetTitle, widgets


def _component(request, widget=None):
    return f'<p>{widget.id}</p>'


class WidgetRegistryTests(SimpleTestCase):
    def test_plugin_registers_metrics_widget(self):
        widget = widgets.get('content-metrics')
        self.assertIsNotNone(widget)
        self.assertEqual(widget.plugin_id, 'content_metrics')
        self.assertEqual(widget.title.id, 'content_metrics.widget.metrics.title')
        self.assertEqual(widget.title.default_message, 'Content Metrics')

    def test_duplicate_id_is_rejected(self):
        registry = WidgetRegistry()
        title = WidgetTitle(id='x.title', default_message='X')
        registry.register(id='x', title=title, component=_component, plugin_id='x')
        with self.assertRaises(ImproperlyConfigured):
            registry.register(id='x', title=title, component=_component, plugin_id='x')

    def test_unregister_removes_widget(self):
        registry = WidgetRegistry()
        registry.register(id='x', title=WidgetTitle(id='x.title', default_message='X'), component=_component, plugin_id='x')
        registry.unregister('x')
        self.assertFalse(registry.is_registered('x'))
        self.assertEqual(registry.all(), [])
        # unknown ids are ignored
        registry.unregister('x')

    def test_component_path_is_imported_lazily(self):
        registry = WidgetRegistry()
        widget = registry.register(
            id='lazy',
            title=WidgetTitle(id='lazy.title', default_message='Lazy'),
            component='content_metrics.tests.test_widgets._component',
            plugin_id='tests',
        )
        self.assertIsInstance(widget.component, str)
        self.assertEqual(widget.render(), '<p>lazy</p>')
        self.assertIs(widget.component, _component)


class MetricsWidgetRenderTests(TestCase):
    def setUp(self):
        User = get_user_model()
        self.admin = User.objects.create_superuser(username='admin', password='pw', email='admin@example.com')
        Article.objects.create(title='Hello', slug='hello')

    def test_admin_index_shows_widget(self):
        self.client.force_login(self.admin)
        resp = self.client.get('/admin/')
        self.assertEqual(resp.status_code, 200)
        html = resp.content.decode()
        self.assertIn('id="widget-content-metrics"', html)
        self.assertIn('data-state="populated"', html)
        self.assertInHTML('<tr><td>Article</td><td><strong>1</strong></td></tr>', html)
        self.assertInHTML('<tr><td>Page</td><td><strong>0</strong></td></tr>', html)

    def test_admin_widget_reads_counts_in_process(self):
        self.client.force_login(self.admin)
        with mock.patch('requests.Session.request') as request:
            resp = self.client.get('/admin/')
        request.assert_not_called()
        self.assertContains(resp, 'data-state="populated"')

    def test_widget_shows_error_when_aggregation_fails(self):
        aggregator = mock.Mock()
        aggregator.get_content_counts.side_effect = RuntimeError('registry unavailable')
        with mock.patch('content_metrics.display.get_aggregator', return_value=aggregator), \
                self.assertLogs('content_metrics.display', level='ERROR'):
            html = render_metrics_widget(widget=widgets.get('content-metrics'))
        self.assertIn('data-state="error"', html)
        self.assertIn('Content Metrics', html)
        self.assertNotIn('registry unavailable', html)
