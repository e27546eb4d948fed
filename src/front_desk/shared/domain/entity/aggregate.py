from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下の値オブジェクトへの変更は必ず集約ルートのメソッドを経由
    - トランザクション境界 = 集約境界 (DynamoDB の 1 アイテム)
    """
