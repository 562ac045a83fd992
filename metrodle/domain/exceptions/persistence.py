class PersistenceCorrupt(Exception):
    """Raised when a stored record cannot be decoded.

    Never surfaced to players: repositories catch it and start fresh.
    """
