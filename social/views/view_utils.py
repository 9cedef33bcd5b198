from django.utils.dateparse import parse_datetime
from rest_framework.exceptions import ValidationError


def int_param(request, name, default, *, minimum=1, maximum=None):
    """Read a positive integer query param, falling back to default when absent or malformed."""
    raw = request.query_params.get(name)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    value = max(minimum, value)
    if maximum is not None:
        value = min(maximum, value)
    return value


def datetime_param(request, name):
    """Read an ISO-8601 timestamp query param; 400 when present but unparseable."""
    raw = request.query_params.get(name)
    if not raw:
        return None
    try:
        # "+" in an offset arrives as a space when left unescaped
        value = parse_datetime(raw.replace(" ", "+"))
    except ValueError:
        value = None
    if value is None:
        raise ValidationError(f"Invalid {name} timestamp")
    return value
