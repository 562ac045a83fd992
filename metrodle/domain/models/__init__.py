from .game import (
    MAX_ATTEMPTS,
    GameState,
    GameStatus,
    GuessFeedback,
    GuessOutcome,
    Knowledge,
    Stats,
)
from .geo import GeoPoint
from .line import LINES, Line
from .network import NetworkData, StationGraph, interchange_key
from .station import Station

__all__ = [
    "GeoPoint",
    "Line",
    "LINES",
    "Station",
    "NetworkData",
    "StationGraph",
    "interchange_key",
    "MAX_ATTEMPTS",
    "GameState",
    "GameStatus",
    "GuessFeedback",
    "GuessOutcome",
    "Knowledge",
    "Stats",
]
