"""
Goal: Pydantic models for the little bits of state one arcctl invocation carries around.
Everything here is built fresh per command and thrown away afterwards.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Sentinel(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


class ProcessState(BaseModel):
    """Whether the app was alive before we touched it. Captured once, never updated."""

    model_config = ConfigDict(frozen=True)

    was_running: bool = True


class RetryPolicy(BaseModel):
    """Timing for the tab search loop that runs inside the app (seconds)."""

    model_config = ConfigDict(frozen=True)

    initial_delay: float = Field(1.0, ge=0)
    max_attempts: int = Field(10, ge=1)
    retry_delay: float = Field(0.5, ge=0)

    @property
    def worst_case_wait(self) -> float:
        # No delay after the final attempt
        return self.initial_delay + (self.max_attempts - 1) * self.retry_delay


DEFAULT_RETRY_POLICY = RetryPolicy()


class Window(BaseModel):
    id: int
    title: str


WindowList = TypeAdapter(List[Window])
