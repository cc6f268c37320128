"""Errors raised while serializing a workspace to Structurizr DSL."""
from __future__ import annotations


class DslError(ValueError):
    """Base class for serialization failures."""


class UnknownIdentifierReference(DslError):
    """A relationship or view references an identifier that was never assigned."""

    def __init__(self, reference: str, context: str):
        super().__init__(f"unknown identifier reference '{reference}' in {context}")
        self.reference = reference
        self.context = context


class InvalidText(DslError):
    """A value cannot be written as a single-line DSL token."""

    def __init__(self, field: str, value: str, reason: str = "contains a line break"):
        super().__init__(f"{field} {reason} and cannot be written to the DSL")
        self.field = field
        self.value = value


class IdentifierSpaceExhausted(DslError):
    """No free collision suffix was found for an identifier candidate."""

    def __init__(self, candidate: str, limit: int):
        super().__init__(f"no unique identifier left for '{candidate}' after {limit} attempts")
        self.candidate = candidate
        self.limit = limit


class SerializerConsumedError(RuntimeError):
    """The serializer was used after serialize() finalized it."""
