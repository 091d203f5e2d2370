"""Error taxonomy for nutrition estimation and scaling."""


class NutritionError(Exception):
    """Base class for nutrition engine errors."""


class ValidationError(NutritionError):
    """Raised when a user-supplied quantity or multiplier is unusable."""


class ParseError(NutritionError):
    """An estimation response had no extractable JSON object."""


class TransportError(NutritionError):
    """The estimation service could not be reached or failed."""
