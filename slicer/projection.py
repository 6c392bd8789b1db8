"""Implementation of field projection.

A record is a mapping from field names to values. A sliceable is either a
single record or a sequence of records. Projecting a sliceable keeps only the
requested fields of every record:

    * in strict mode a record must hold every requested field, otherwise it is
      dropped from the result;
    * in non-strict mode a record is reduced to the requested fields it holds,
      and is returned unchanged when it holds none of them.

The order of the requested fields carries no meaning. Projected records list
their fields in the order the fields were requested, but callers must not
depend on it.

Input records are never modified, projected records are always new
dictionaries.
"""
from collections import ChainMap
from collections.abc import Mapping, Sequence

DEFAULT_CONFIG = {"strict": True}


def has_own_field(record, name):
    """Check if the field ``name`` is held by the record itself.

    Only keys stored directly in the record count. Values that are merely
    reachable through the record, like the parent maps of a ``ChainMap`` or
    defaults produced by ``__missing__``, are inherited and do not count.
    """
    if isinstance(record, ChainMap):
        return name in record.maps[0]
    return name in record


def is_record_sequence(value):
    """Check if the value is a sequence of records and not a string."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def extract_fields(record, fields, strict=True):
    """Extract the given fields out of a record.

    :param record: record from which the fields are extracted
    :type record: Mapping
    :param fields: names of the fields to extract
    :type fields: Sequence[str]
    :param strict: drop records missing any of the fields
    :type strict: bool

    :return: a new dictionary with the extracted fields, the unchanged
        record when nothing matched in non-strict mode, or ``None`` when the
        record must be dropped in strict mode
    """
    if not isinstance(record, Mapping):
        # Only records can be projected, everything else passes through.
        return record

    extract = {}
    for field in fields:
        if has_own_field(record, field):
            extract[field] = record[field]

    if strict:
        if len(extract) < len(fields):
            return None
        return extract

    # If no field matched, return the full record.
    if not extract:
        return record

    return extract


def project(sliceables, fields, strict=True):
    """Project the given fields out of one record or a sequence of records.

    :param sliceables: a single record or a sequence of records
    :param fields: names of the fields to extract
    :type fields: Sequence[str]
    :param strict: drop records missing any of the fields
    :type strict: bool

    :return: list of projected records, never longer than the input
    :rtype: list
    """
    if not is_record_sequence(sliceables):
        sliceables = [sliceables]

    projected = []
    for record in sliceables:
        extract = extract_fields(record, fields, strict)
        if extract is not None:
            projected.append(extract)

    return projected


class Projector:
    """Field projection with a fixed strict/non-strict mode."""

    def __init__(self, strict=True):
        """Initialize attributes."""
        self._strict = strict

    def __repr__(self):
        """Return the projector representation."""
        return "{}(strict={!r})".format(self.__class__.__name__, self._strict)

    @property
    def strict(self):
        """Return whether records missing any requested field are dropped."""
        return self._strict

    def extract_fields(self, record, fields):
        """Extract the fields out of a record, see :func:`extract_fields`."""
        return extract_fields(record, fields, self._strict)

    def project(self, sliceables, fields):
        """Project the fields out of sliceables, see :func:`project`."""
        return project(sliceables, fields, self._strict)


def create_projector(config=None):
    """Create a new projector from the given configuration.

    :param config: configuration mapping, the only recognized option is
        ``strict`` (``True`` by default)
    :type config: Mapping

    :raises TypeError: when ``strict`` is not a boolean
    :raises ValueError: when the configuration holds unknown options
    """
    options = dict(DEFAULT_CONFIG)
    options.update(config or {})

    unknown = sorted(set(options) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(
            "Unknown projector options: {}.".format(", ".join(map(str, unknown)))
        )

    if not isinstance(options["strict"], bool):
        raise TypeError(
            "Projector option 'strict' must be a boolean, got {!r}.".format(
                options["strict"]
            )
        )

    return Projector(strict=options["strict"])
