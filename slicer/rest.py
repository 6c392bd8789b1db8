"""Support for partial responses in Django REST Framework views."""
from .conf import get_projector
from .middleware import slice_response


class SlicedResponseMixin:
    """Mixin that slices response data based on request arguments.

    Set ``slicer_strict`` to ``True`` or ``False`` to override the configured
    mode for the view.
    """

    slicer_strict = None

    def get_projector(self):
        """Return the projector used to slice the view's responses."""
        return get_projector(strict=self.slicer_strict)

    def finalize_response(self, request, response, *args, **kwargs):
        """Slice the response data."""
        response = super().finalize_response(request, response, *args, **kwargs)
        return slice_response(response, request, self.get_projector())
