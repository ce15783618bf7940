"""Shared base classes for calculator contracts."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ParamsModel(BaseModel):
    """Immutable calculator input. Unknown keys are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class ResultModel(BaseModel):
    """Immutable calculator output."""

    model_config = ConfigDict(frozen=True)


class ContributionTiming(str, Enum):
    """When a monthly deposit lands relative to that month's interest."""

    END = "end"  # interest first, deposit earns from next month
    START = "start"  # deposit first, earns interest the same month
