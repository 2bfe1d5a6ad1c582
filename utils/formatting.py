"""
Display Formatting

Currency and percentage formatting for the presentation layer. Uses the
Flask-Babel locale of the current request.
"""

from decimal import Decimal

from flask import current_app
from flask_babel import format_currency, format_decimal


def money(value, currency=None):
    """Format a Decimal amount in the configured currency, e.g. '$ 1.234,50' for es_AR."""
    currency = currency or current_app.config.get('CURRENCY', 'ARS')
    return format_currency(value, currency)


def percent(value):
    """Format a margin percent with one decimal, e.g. '20,0 %'."""
    return f"{format_decimal(Decimal(value), format='#,##0.0')} %"
