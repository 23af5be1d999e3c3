"""
Base class for use cases with input validation.

``handle`` validates the raw input against the use case's pydantic model
before ``execute`` runs, so invalid input never reaches a repository.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Type, TypeVar

import pydantic
from pydantic import ConfigDict

from qservice.errors.validation import input_validation_error

TInput = TypeVar("TInput", bound=pydantic.BaseModel)
TOutput = TypeVar("TOutput")


class UseCaseInput(pydantic.BaseModel):
    """Input models accept camelCase wire names as well as field names."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class BaseUseCase(ABC, Generic[TInput, TOutput]):
    input_model: Type[TInput]
    input_prefix: str

    def handle(self, data: Any) -> TOutput:
        if isinstance(data, self.input_model):
            payload = data
        else:
            try:
                payload = self.input_model.model_validate(data)
            except pydantic.ValidationError as exc:
                raise input_validation_error(
                    exc,
                    self.input_prefix,
                    f"Invalid use case input: {type(self).__name__}",
                ) from exc
        return self.execute(payload)

    @abstractmethod
    def execute(self, data: TInput) -> TOutput: ...
