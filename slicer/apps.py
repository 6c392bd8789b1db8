""".. Ignore pydocstyle D400.

====================
Slicer Configuration
====================

"""
from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class SlicerConfig(AppConfig):
    """Slicer AppConfig."""

    name = "slicer"
    verbose_name = _("Slicer")

    def ready(self):
        """Application initialization."""
        # Fail fast on invalid settings.
        from .conf import get_slicer_settings

        get_slicer_settings()
