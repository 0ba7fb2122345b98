"""Exceptions raised by the citation and resolution engine.

Absence of a document, provision or version is never an exception; it is
reported through result fields. These exceptions cover malformed input only.
"""


class LegalEngineError(Exception):
    """Base exception for engine errors."""


class FormatError(LegalEngineError, ValueError):
    """A caller-supplied date, style or citation does not have the required shape."""
