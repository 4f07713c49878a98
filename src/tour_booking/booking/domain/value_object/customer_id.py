from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerId:
    """予約者（顧客）ID"""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("CustomerId cannot be empty")

    def __str__(self) -> str:
        return self.value
