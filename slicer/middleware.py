"""Slicer middleware class."""

import logging

from .adapter import slice_payload
from .conf import get_projector, get_slicer_settings
from .fields import get_requested_fields

logger = logging.getLogger(__name__)

#: Attribute marking responses whose data has already been sliced.
SLICED_MARKER = "_slicer_sliced"


def slice_response(response, request, projector):
    """Slice the data of a Django REST Framework response in place.

    Only responses carrying a ``data`` attribute that have not been rendered
    yet can be sliced, all other responses are left alone.

    :return: the given response
    """
    if getattr(response, SLICED_MARKER, False):
        return response
    if not hasattr(response, "data") or getattr(response, "is_rendered", True):
        return response

    slicer_settings = get_slicer_settings()
    fields = get_requested_fields(
        request,
        param=slicer_settings["QUERY_PARAM"],
        separator=slicer_settings["SEPARATOR"],
    )
    response.data = slice_payload(projector, response.data, fields)
    setattr(response, SLICED_MARKER, True)

    return response


class SlicerMiddleware:
    """Send partial responses.

    The middleware intercepts the data of Django REST Framework responses
    before they are rendered and keeps only the fields requested with the
    configured query parameter (``fields`` by default)::

        GET /api/persons?fields=firstName,lastName

    Status codes and headers of the responses are not changed.
    """

    def __init__(self, get_response):
        """Initialize middleware."""
        self.get_response = get_response
        self.projector = get_projector()

    def __call__(self, request):
        """Process the request."""
        return self.get_response(request)

    def process_template_response(self, request, response):
        """Slice the response data before the response is rendered."""
        return slice_response(response, request, self.projector)
