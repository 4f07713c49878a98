from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）

    残金などの差額を表すため負の金額も保持する。
    """

    amount: Decimal
    currency: Currency

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def _ensure_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError("Cannot operate on money with different currencies")

    def subtract(self, other: Money) -> Money:
        """金額を減算する"""
        self._ensure_same_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def multiply(self, factor: Decimal) -> Money:
        """金額に係数を掛ける"""
        return Money(amount=self.amount * factor, currency=self.currency)

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_negative(self) -> bool:
        return self.amount < 0

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        """0 円（0 ドン）を生成"""
        return cls(Decimal("0"), currency)
