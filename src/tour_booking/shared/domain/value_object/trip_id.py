from dataclasses import dataclass


@dataclass(frozen=True)
class TripId:
    """ツアー催行回ID

    同じ値を持つ TripId は同一とみなされる。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("TripId cannot be empty")

    def __str__(self) -> str:
        return self.value
