"""Exceptions raised by the game engine."""


class GameError(Exception):
    """Base class for game engine errors."""


class ResolutionError(GameError):
    """A target or killer marker had no eligible player to resolve to."""


class GameInProgressError(GameError):
    """A start command arrived while a game is already running in the context."""


class LobbyClosedError(GameError):
    """A join signal arrived outside the lobby window."""


class NotEnoughPlayersError(GameError):
    """A round was requested with fewer than two active players."""
