"""Central place for package metadata."""

# NOTE: We use __title__ instead of simply __name__ since the latter would
#       interfere with a global variable __name__ denoting object's name.
__title__ = "django-slicer"
__summary__ = "Partial JSON responses for Django and Django REST Framework"
__url__ = "https://github.com/akoenig/django-slicer"
__version__ = "1.0.0"

__author__ = "André König"
__email__ = "akoenig@posteo.de"

__license__ = "MIT"
__copyright__ = "2013-2026, " + __author__

__all__ = (
    "__title__",
    "__summary__",
    "__url__",
    "__version__",
    "__author__",
    "__email__",
    "__license__",
    "__copyright__",
)
