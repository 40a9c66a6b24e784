"""
Locale provider backed by the catalog Locale table.
"""

from typing import List

from .models import Locale


def active_locale_codes() -> List[str]:
    """Return the configured locale codes, default locale first."""
    return list(Locale.objects.order_by('-is_default', 'code').values_list('code', flat=True))
