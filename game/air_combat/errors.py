"""
Exceptions raised by the air combat core
"""


class AirCombatError(Exception):
    """Base class for all air combat errors"""


class InvalidConfiguration(AirCombatError, ValueError):
    """Arena size, entity size or cadence values that cannot describe a game"""


class PreconditionViolation(AirCombatError, RuntimeError):
    """An operation was called before the game session was created"""
