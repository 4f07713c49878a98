from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティ・値オブジェクトへの変更は必ず集約ルートを経由
    - 1回の操作 = 1つの集約
    """
