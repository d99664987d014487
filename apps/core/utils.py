"""
Utility functions for the application.
"""
import random
import string
from datetime import datetime, time, timedelta
from decimal import Decimal

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from .exceptions import ValidationError


def generate_order_number(prefix='POS'):
    """
    Generate a unique order number.
    Format: {prefix}YYYYMMDDHHmmss{random 4 digits}
    """
    timestamp = timezone.localtime().strftime('%Y%m%d%H%M%S')
    random_suffix = ''.join(random.choices(string.digits, k=4))
    return f'{prefix}{timestamp}{random_suffix}'


def parse_bool(value):
    """
    Interpret form values: only true/1 (any case) count as true.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in ('true', '1')


def start_of_day(day):
    """Return the aware datetime at local midnight for a date."""
    return timezone.make_aware(datetime.combine(day, time.min))


def _parse_or_none(parser, value):
    # Django parsers raise ValueError for well-formed but impossible values.
    try:
        return parser(value)
    except ValueError:
        return None


def parse_boundary(value, param_name):
    """
    Parse a date or datetime query value into an aware datetime.
    Plain dates map to local midnight.
    """
    parsed = _parse_or_none(parse_datetime, value)
    if parsed is None:
        day = _parse_or_none(parse_date, value)
        if day is None:
            raise ValidationError(f'Fecha inválida en "{param_name}": {value}', field=param_name)
        return start_of_day(day)
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def parse_date_range(params, default_today=False):
    """
    Resolve the (gte, lt) datetime window from query params.

    `date` selects one whole local day. Otherwise `from` (inclusive) and
    `to` (exclusive) are used as given. With neither, the window is either
    today or unbounded.
    """
    date_value = params.get('date')
    if date_value:
        day = _parse_or_none(parse_date, date_value)
        if day is None:
            parsed = _parse_or_none(parse_datetime, date_value)
            if parsed is None:
                raise ValidationError(f'Fecha inválida en "date": {date_value}', field='date')
            day = timezone.localtime(parsed).date() if timezone.is_aware(parsed) else parsed.date()
        gte = start_of_day(day)
        return gte, start_of_day(day + timedelta(days=1))

    from_value = params.get('from')
    to_value = params.get('to')
    if from_value or to_value:
        gte = parse_boundary(from_value, 'from') if from_value else None
        lt = parse_boundary(to_value, 'to') if to_value else None
        return gte, lt

    if default_today:
        today = timezone.localdate()
        return start_of_day(today), start_of_day(today + timedelta(days=1))

    return None, None


def range_filter(field, gte, lt):
    """Build ORM filter kwargs for a half-open datetime window."""
    filters = {}
    if gte is not None:
        filters[f'{field}__gte'] = gte
    if lt is not None:
        filters[f'{field}__lt'] = lt
    return filters


def parse_positive_int(value, default, param_name):
    """Parse an integer query param, falling back to a default."""
    if value in (None, ''):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f'Valor inválido en "{param_name}": {value}', field=param_name)
    if number < 0:
        raise ValidationError(f'Valor inválido en "{param_name}": {value}', field=param_name)
    return number


def parse_decimal(value, default, param_name):
    """Parse a non-negative decimal query param, falling back to a default."""
    if value in (None, ''):
        return Decimal(str(default))
    try:
        number = Decimal(str(value))
    except (ArithmeticError, ValueError):
        raise ValidationError(f'Valor inválido en "{param_name}": {value}', field=param_name)
    if not number.is_finite() or number < 0:
        raise ValidationError(f'Valor inválido en "{param_name}": {value}', field=param_name)
    return number
