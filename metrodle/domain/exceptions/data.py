class DataIntegrityFault(Exception):
    """Base exception for static network data that cannot support a fair game.

    These are fatal: startup must abort rather than serve a puzzle whose
    distances or line hints could be wrong.
    """


class UnknownLineLabel(DataIntegrityFault):
    """Raised when a station record names a line outside the catalog."""


class UnknownStationReference(DataIntegrityFault):
    """Raised when an adjacency/interchange record points at no known station."""


class StationWithoutLines(DataIntegrityFault):
    """Raised when a station ends up with no line memberships."""


class DisconnectedNetwork(DataIntegrityFault):
    """Raised when some roster station cannot be reached from another."""


class MissingRosterEntry(DataIntegrityFault):
    """Raised when a station id or vertex is referenced but not in the roster."""
