""".. Ignore pydocstyle D400.

====================
Slicer Configuration
====================

Slicer is configured with the ``SLICER`` Django setting:

    .. code:: python

        SLICER = {
            # Drop records missing any of the requested fields.
            "STRICT": True,
            # Query parameter holding the requested fields.
            "QUERY_PARAM": "fields",
            # Separator of the requested fields.
            "SEPARATOR": ",",
        }

All keys are optional.

"""
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .fields import FIELD_SEPARATOR, FIELDS_QUERY_PARAM
from .projection import create_projector

DEFAULTS = {
    "STRICT": True,
    "QUERY_PARAM": FIELDS_QUERY_PARAM,
    "SEPARATOR": FIELD_SEPARATOR,
}


def get_slicer_settings():
    """Return the validated ``SLICER`` settings merged with the defaults."""
    user_settings = getattr(settings, "SLICER", {})
    if not isinstance(user_settings, dict):
        raise ImproperlyConfigured("The SLICER setting must be a dictionary.")

    unknown = sorted(set(user_settings) - set(DEFAULTS))
    if unknown:
        raise ImproperlyConfigured(
            "Unknown SLICER settings: {}.".format(", ".join(map(str, unknown)))
        )

    slicer_settings = dict(DEFAULTS)
    slicer_settings.update(user_settings)

    if not isinstance(slicer_settings["STRICT"], bool):
        raise ImproperlyConfigured("SLICER['STRICT'] must be a boolean.")

    for key in ("QUERY_PARAM", "SEPARATOR"):
        value = slicer_settings[key]
        if not isinstance(value, str) or not value:
            raise ImproperlyConfigured(
                "SLICER['{}'] must be a non-empty string.".format(key)
            )

    return slicer_settings


def get_projector(strict=None):
    """Create a projector from the settings.

    :param strict: override the configured ``STRICT`` mode if not ``None``
    """
    if strict is None:
        strict = get_slicer_settings()["STRICT"]
    return create_projector({"strict": strict})
