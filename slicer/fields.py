"""Parsing of requested field names."""

FIELD_SEPARATOR = ","
FIELDS_QUERY_PARAM = "fields"


def parse_fields(value, separator=FIELD_SEPARATOR):
    """Parse requested field names.

    :param value: ``None``, a separated string of field names or an iterable
        of such strings (one for each occurrence of the query parameter)
    :param separator: string separating the field names

    :return: distinct, non-empty field names in the order of their first
        occurrence
    :rtype: tuple
    """
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]

    fields = []
    for item in value:
        for name in item.split(separator):
            name = name.strip()
            if name and name not in fields:
                fields.append(name)

    return tuple(fields)


def get_requested_fields(request, param=FIELDS_QUERY_PARAM, separator=FIELD_SEPARATOR):
    """Return the field names requested in the request's query string.

    Both Django's ``HttpRequest`` and Django REST Framework's ``Request``
    are supported.
    """
    query_params = getattr(request, "query_params", None)
    if query_params is None:
        query_params = request.GET

    return parse_fields(query_params.getlist(param), separator)
