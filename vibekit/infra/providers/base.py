"""Structured-generation provider protocol definition."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

SchemaT = TypeVar("SchemaT", bound=BaseModel)


@runtime_checkable
class StructuredModel(Protocol):
    """A model handle bound to one vendor and one model identifier."""

    model_id: str

    async def generate_object(self, prompt: str, schema: type[SchemaT]) -> SchemaT:
        """Generate an object matching ``schema`` from a single prompt.

        Output that does not validate raises ``pydantic.ValidationError``.
        """
        ...


@runtime_checkable
class ModelFactory(Protocol):
    """What ``create_provider`` returns: call it with a model id."""

    name: str

    def __call__(self, model_id: str) -> StructuredModel:
        ...
