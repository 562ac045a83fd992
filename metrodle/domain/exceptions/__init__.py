from .data import (
    DataIntegrityFault,
    DisconnectedNetwork,
    MissingRosterEntry,
    StationWithoutLines,
    UnknownLineLabel,
    UnknownStationReference,
)
from .game import (
    DuplicateGuess,
    GameAlreadyFinished,
    GameNotFinished,
    StationNotFound,
    UserInputRejected,
)
from .persistence import PersistenceCorrupt

__all__ = [
    "DataIntegrityFault",
    "DisconnectedNetwork",
    "MissingRosterEntry",
    "StationWithoutLines",
    "UnknownLineLabel",
    "UnknownStationReference",
    "UserInputRejected",
    "StationNotFound",
    "DuplicateGuess",
    "GameAlreadyFinished",
    "GameNotFinished",
    "PersistenceCorrupt",
]
