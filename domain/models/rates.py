from dataclasses import dataclass, field
from enum import Enum
from typing import Any

RateMap = dict[str, float]


class SummaryMode(str, Enum):
	DAY = 'day'
	NONE = 'none'


@dataclass
class CacheEntry:
	value: Any
	expiry: float  # absolute, in the cache clock's seconds


@dataclass(frozen=True)
class DayRecord:
	date: str
	rate: float | None
	pct_change: float | None


@dataclass(frozen=True)
class SummaryRecord:
	start_rate: float | None
	end_rate: float | None
	total_pct_change: float | None
	mean_rate: float | None


@dataclass(frozen=True)
class SummaryResult:
	summary: SummaryRecord
	days: list[DayRecord] = field(default_factory=list)
