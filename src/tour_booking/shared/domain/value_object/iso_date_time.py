from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

SECONDS_PER_DAY = 86400


@dataclass(frozen=True)
class IsoDateTime:
    """日時(ISO 8601形式)

    オフセットなしの日時は UTC として比較・計算する。
    """

    value: datetime

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    def __str__(self) -> str:
        return self.value.isoformat()

    def _as_utc(self) -> datetime:
        if self.value.tzinfo is None:
            return self.value.replace(tzinfo=timezone.utc)
        return self.value

    def is_before(self, other: IsoDateTime) -> bool:
        """他の日時より前かどうか"""
        return self._as_utc() < other._as_utc()

    def minus_days(self, days: int) -> IsoDateTime:
        """指定日数前の日時を返す"""
        return IsoDateTime(value=self.value - timedelta(days=days))

    def days_until(self, other: IsoDateTime) -> float:
        """other までの日数（端数を含む。other が過去なら負）"""
        return (other._as_utc() - self._as_utc()).total_seconds() / SECONDS_PER_DAY
