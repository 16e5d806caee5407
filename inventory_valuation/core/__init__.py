"""Core domain layer - entities, interfaces, and exceptions."""

from inventory_valuation.core import entities, exceptions, interfaces

__all__ = ["entities", "interfaces", "exceptions"]
