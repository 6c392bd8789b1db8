"""Glue between response sending code and the projector."""
import enum
import logging
from collections.abc import Mapping

from .projection import is_record_sequence
from .utils import BraceMessage as __

logger = logging.getLogger(__name__)


class CallShape(enum.Enum):
    """Supported shapes of the arguments of a response sending call."""

    #: ``json(payload)``
    RECORD_ONLY = "record_only"
    #: ``json(payload, status)``
    RECORD_THEN_STATUS = "record_then_status"
    #: ``json(status, payload)``
    STATUS_THEN_RECORD = "status_then_record"


def is_status_code(value):
    """Check if the value is a HTTP status code."""
    # ``bool`` is a subclass of ``int`` but never a status code.
    return isinstance(value, int) and not isinstance(value, bool)


def is_sliceable(payload):
    """Check if the payload is a record or a sequence of records."""
    return isinstance(payload, Mapping) or is_record_sequence(payload)


def resolve_call_shape(args):
    """Resolve the shape of the response sending call.

    :param args: positional arguments of the call
    :type args: tuple

    :return: tuple ``(shape, payload, status)``, ``status`` is ``None`` for
        :attr:`CallShape.RECORD_ONLY`
    :raises TypeError: when the arguments do not match any shape
    """
    if len(args) == 1:
        return CallShape.RECORD_ONLY, args[0], None

    if len(args) == 2:
        first, second = args
        if is_status_code(second):
            return CallShape.RECORD_THEN_STATUS, first, second
        if is_status_code(first):
            return CallShape.STATUS_THEN_RECORD, second, first
        raise TypeError("Expected a payload and a status code, got {!r}.".format(args))

    raise TypeError(
        "Expected 1 or 2 positional arguments, got {}.".format(len(args))
    )


def slice_payload(projector, payload, fields):
    """Project the fields out of the payload and restore its envelope.

    The payload is returned untouched when no fields are requested or when it
    is not sliceable. Otherwise a sequence payload always produces a list,
    while a single record produces a single record (``{}`` when dropped).

    :param projector: projector used for slicing
    :type projector: ~slicer.projection.Projector
    :param payload: response payload
    :param fields: requested field names
    :type fields: Sequence[str]
    """
    if not fields:
        logger.debug("No fields requested, payload is not sliced.")
        return payload

    if not is_sliceable(payload):
        logger.debug(
            __("Payload of type '{}' is not sliceable.", type(payload).__name__)
        )
        return payload

    projected = projector.project(payload, fields)

    if isinstance(payload, Mapping):
        logger.debug(
            __("Sliced fields {} out of a single record.", ", ".join(fields))
        )
        return projected[0] if projected else {}

    logger.debug(
        __(
            "Sliced fields {} out of {} records, {} records kept.",
            ", ".join(fields),
            len(payload),
            len(projected),
        )
    )
    return projected


def entangle(send, projector, fields):
    """Wrap a response sending callable so it sends sliced payloads.

    The returned function accepts the payload and an optional status code in
    either order, exactly like ``json(payload)``, ``json(payload, status)`` or
    ``json(status, payload)``, and calls ``send(payload)`` or
    ``send(payload, status=status)`` with the sliced payload.

    :param send: callable sending the payload
    :param projector: projector used for slicing
    :type projector: ~slicer.projection.Projector
    :param fields: requested field names
    :type fields: Sequence[str]
    """

    def json(*args):
        """Send the sliced payload."""
        shape, payload, status = resolve_call_shape(args)
        payload = slice_payload(projector, payload, fields)

        if shape is CallShape.RECORD_ONLY:
            return send(payload)
        return send(payload, status=status)

    return json
