"""Shortcuts for sending partial responses from plain Django views."""
from django.http import JsonResponse

from .adapter import entangle
from .conf import get_projector, get_slicer_settings
from .fields import get_requested_fields


def sliced_json(request, **kwargs):
    """Return a function sending sliced JSON responses for the request.

    Example of usage:

        .. code-block:: python

            def persons(request):
                json = sliced_json(request)
                return json(200, [{"firstName": "André", "lastName": "König"}])

    The returned function accepts the payload and an optional status code in
    either order. Additional keyword arguments are passed to ``JsonResponse``.
    """
    slicer_settings = get_slicer_settings()
    fields = get_requested_fields(
        request,
        param=slicer_settings["QUERY_PARAM"],
        separator=slicer_settings["SEPARATOR"],
    )

    def send(payload, status=200):
        return JsonResponse(payload, status=status, safe=False, **kwargs)

    return entangle(send, get_projector(), fields)
