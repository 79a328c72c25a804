"""
Core business logic - transport-agnostic.
Used by the web API, the background reminder job and scripts.
"""

# Database (SQLAlchemy)
from .database import get_connection, get_transaction, get_engine, close_engine, is_configured

# Wall clock
from .timezone import localize, now_local, to_local

# Quotes
from .quotes import QUOTES, random_quote

__all__ = [
    # Database (SQLAlchemy)
    'get_connection', 'get_transaction', 'get_engine', 'close_engine', 'is_configured',
    # Wall clock
    'now_local', 'to_local', 'localize',
    # Quotes
    'QUOTES', 'random_quote',
]
