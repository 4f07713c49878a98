from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") やドメインの計算から呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する
    （float の 2 進誤差を持ち込まないため）。
    """
    if isinstance(v, Decimal):
        return v
    try:
        return Decimal(str(v))
    except InvalidOperation as e:
        raise ValueError(f"Invalid decimal value: {v!r}") from e
