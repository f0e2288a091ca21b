"""Error taxonomy for the order workflow.

The ranking core itself raises nothing for well-formed values; these are
raised by the collaborators around it.
"""


class ValetDeliveryError(Exception):
    """Base class for every error raised by this package."""


class InputParseError(ValueError, ValetDeliveryError):
    """A console entry could not be parsed; the prompter asks again."""


class LocationResolutionError(ValetDeliveryError):
    """The valet's current location could not be resolved."""
