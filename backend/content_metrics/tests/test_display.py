from django.test import SimpleTestCase

from content_metrics.counts import Deferred, Immediate, format_count
from content_metrics.display import MetricsDisplay, WidgetState
from content_metrics.tests.fakes import make_fetch


class MetricsDisplayTests(SimpleTestCase):
    def test_starts_loading(self):
        display = MetricsDisplay(make_fetch({}))
        self.assertEqual(display.state, WidgetState.LOADING)
        self.assertIn('widget-loading', display.render())

    async def test_empty_mapping_renders_no_data(self):
        display = MetricsDisplay(make_fetch({}))
        self.assertEqual(await display.load(), WidgetState.EMPTY)
        self.assertIn('No content types found', display.render())

    async def test_missing_body_is_empty(self):
        display = MetricsDisplay(make_fetch(None))
        self.assertEqual(await display.load(), WidgetState.EMPTY)

    async def test_populated_rows_keep_order(self):
        display = MetricsDisplay(make_fetch({'Article': Immediate(5), 'Page': Immediate(2)}))
        self.assertEqual(await display.load(), WidgetState.POPULATED)
        self.assertEqual(display.rows, [('Article', '5'), ('Page', '2')])

        html = display.render()
        self.assertInHTML('<tr><td>Article</td><td><strong>5</strong></td></tr>', html)
        self.assertInHTML('<tr><td>Page</td><td><strong>2</strong></td></tr>', html)
        self.assertLess(html.index('Article'), html.index('Page'))

    async def test_deferred_count_is_awaited(self):
        async def seven():
            return 7

        display = MetricsDisplay(make_fetch({'Article': Deferred(seven)}))
        await display.load()
        self.assertEqual(display.metrics, {'Article': 7})
        self.assertEqual(display.rows, [('Article', '7')])
        self.assertNotIn('function', display.render())

    async def test_non_numeric_deferred_result_is_stringified(self):
        async def pending():
            return ['n/a']

        display = MetricsDisplay(make_fetch({'Article': Deferred(pending)}))
        await display.load()
        self.assertEqual(display.metrics, {'Article': 'n/a'})

    async def test_rejected_fetch_shows_generic_error(self):
        display = MetricsDisplay(make_fetch(exc=RuntimeError('connection refused')))
        with self.assertLogs('content_metrics.display', level='ERROR'):
            self.assertEqual(await display.load(), WidgetState.ERROR)
        self.assertEqual(display.error, 'connection refused')

        html = display.render()
        self.assertIn('widget-error', html)
        self.assertNotIn('connection refused', html)

    async def test_error_without_message_uses_fallback(self):
        display = MetricsDisplay(make_fetch(exc=RuntimeError()))
        with self.assertLogs('content_metrics.display', level='ERROR'):
            await display.load()
        self.assertEqual(display.error, 'An error occurred')

    async def test_failing_deferred_count_is_an_error(self):
        async def broken():
            raise ValueError('count failed')

        display = MetricsDisplay(make_fetch({'Article': Immediate(1), 'Page': Deferred(broken)}))
        with self.assertLogs('content_metrics.display', level='ERROR'):
            self.assertEqual(await display.load(), WidgetState.ERROR)
        self.assertIsNone(display.metrics)

    async def test_load_fetches_once_per_mount(self):
        fetch = make_fetch({'Article': Immediate(1)})
        display = MetricsDisplay(fetch)
        await display.load()
        await display.load()
        self.assertEqual(len(fetch.calls), 1)

        remount = MetricsDisplay(fetch)
        self.assertEqual(remount.state, WidgetState.LOADING)
        await remount.load()
        self.assertEqual(len(fetch.calls), 2)


class FormatCountTests(SimpleTestCase):
    def test_json_spelling(self):
        self.assertEqual(format_count(5), '5')
        self.assertEqual(format_count(5.0), '5')
        self.assertEqual(format_count(2.5), '2.5')
        self.assertEqual(format_count(None), 'null')
        self.assertEqual(format_count(True), 'true')
        self.assertEqual(format_count(False), 'false')
        self.assertEqual(format_count([1, None, 'x']), '1,,x')
        self.assertEqual(format_count('12'), '12')
