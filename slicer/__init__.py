""".. Ignore pydocstyle D400.

======
Slicer
======

Partial JSON responses for Django and Django REST Framework.

Clients select the fields they are interested in with a query parameter::

    http://host/api/persons?fields=firstName,lastName

and only those fields of the returned object(s) are sent back.

"""
from slicer.__about__ import (  # noqa: F401
    __author__,
    __copyright__,
    __email__,
    __license__,
    __summary__,
    __title__,
    __url__,
    __version__,
)
