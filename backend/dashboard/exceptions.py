from rest_framework.views import exception_handler


def custom_exception_handler(exc, context):
    """Give every DRF error body a ``detail`` and the HTTP ``status_code``.

    Field-level validation errors (a list or a per-field dict) are kept
    under ``errors``.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and 'detail' in data:
        body = {'detail': str(data['detail'])}
    else:
        body = {'detail': str(exc), 'errors': data}
    body['status_code'] = response.status_code
    response.data = body
    return response
