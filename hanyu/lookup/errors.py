"""Lookup failures. Both are recoverable: the user simply tries again."""


class LookupFailure(Exception):
    """The word search could not produce results (network, parse or empty reply)."""


class CharacterAnalysisFailure(LookupFailure):
    """The character analysis reply was missing or malformed."""
