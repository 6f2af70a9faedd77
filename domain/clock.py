"""
Horloge du domaine
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Instant courant en UTC (naïf, comme stocké en base)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)
