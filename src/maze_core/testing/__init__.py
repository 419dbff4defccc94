"""In-memory collaborators for tests and demos."""

from .fakes import FakePresentation, IssuedStep

__all__ = ["FakePresentation", "IssuedStep"]
