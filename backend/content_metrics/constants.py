PLUGIN_ID = 'content_metrics'

WIDGET_ID = 'content-metrics'
WIDGET_TITLE_KEY = f'{PLUGIN_ID}.widget.metrics.title'
WIDGET_TITLE_DEFAULT = 'Content Metrics'

# Relative to the deployment root; mirrors content_metrics.urls.
COUNT_PATH = 'api/content-metrics/count/'

SYSTEM_NAMESPACE = 'plugin::'

EMPTY_MESSAGE = 'No content types found'
GENERIC_ERROR_MESSAGE = 'An error occurred'
COUNT_FAILED_MESSAGE = 'Failed to count content types'
