"""Read-only projections returned to query callers."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class YearView(BaseModel):
    """Month totals for one year, as single-entry ``{month: minutes}`` maps."""

    model_config = ConfigDict(frozen=True)

    year: int
    months: tuple[Mapping[str, int], ...]

    @field_validator("months")
    @classmethod
    def _read_only_months(
        cls, value: tuple[Mapping[str, int], ...]
    ) -> tuple[Mapping[str, int], ...]:
        return tuple(MappingProxyType(dict(month)) for month in value)

    @field_serializer("months")
    def _dump_months(self, months: tuple[Mapping[str, int], ...]) -> list[dict[str, int]]:
        return [dict(month) for month in months]


class TrainerView(BaseModel):
    """Monthly workload summary for one trainer.

    ``model_dump(by_alias=True)`` produces camelCase keys
    (``firstName``, ``lastName``) and plain lists for years and months.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    status: str
    years: tuple[YearView, ...]

    @field_serializer("years")
    def _dump_years(self, years: tuple[YearView, ...]) -> list[dict[str, Any]]:
        return [year.model_dump() for year in years]
