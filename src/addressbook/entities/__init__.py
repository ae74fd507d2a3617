"""Entities organised by business concept.

Each entity has its own package holding the domain model, its value objects
and its storable record form, so everything about a person lives in
``entities.person``.
"""

from .person import JsonAdaptedPerson, Person

__all__ = ["Person", "JsonAdaptedPerson"]
