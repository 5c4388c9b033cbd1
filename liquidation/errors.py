"""
Error Types for the Liquidation Engine

Every failure is raised once, synchronously, to the immediate caller.
Nothing in the engine retries.
"""


class LiquidationError(Exception):
    """Base class for all engine errors."""


class ComputationError(LiquidationError, ValueError):
    """Invalid categorical input (unknown tier, phase or surcharge policy).

    Subclasses ValueError so service layers report it as a validation failure.
    """


class TemplateError(LiquidationError):
    """The decree skeleton could not be used for rendering."""


class TemplateUnavailable(TemplateError):
    """The skeleton could not be fetched, timed out, or is empty."""


class TemplateMalformed(TemplateError):
    """The skeleton was fetched but lacks the substitutable content part."""
