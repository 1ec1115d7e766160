"""Exceptions raised by the 2048 engine and its command line front end."""


class Game2048Error(Exception):
    """Base class for all cli2048 errors."""


class InputClosedError(Game2048Error):
    """The player input stream ended or could not be read."""


class GameFinishedError(Game2048Error):
    """A move was submitted after the game reached a terminal state."""
