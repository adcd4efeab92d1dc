import logging

from rest_framework import status
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView

from content_metrics.constants import COUNT_FAILED_MESSAGE
from content_metrics.services import get_aggregator

logger = logging.getLogger(__name__)


class ContentCountView(APIView):
    """Return ``{display name: record count}`` for every user content type.

    Authentication: session (admin dashboard) or JWT bearer token
    Authorization: staff users only
    """
    permission_classes = (IsAdminUser,)

    def get(self, request, *args, **kwargs):
        try:
            data = get_aggregator().get_content_counts()
        except Exception as exc:
            logger.exception('Content count aggregation failed user=%s', getattr(request.user, 'username', None))
            return Response(
                {'detail': str(exc) or COUNT_FAILED_MESSAGE, 'status_code': status.HTTP_500_INTERNAL_SERVER_ERROR},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(data)


__all__ = ['ContentCountView']
