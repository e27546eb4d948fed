from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from front_desk.category.domain import (
    CategoryId,
    CategoryName,
    CategoryStatus,
    RoomCategory,
    RoomCategoryRepository,
)
from front_desk.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from front_desk.shared.infrastructure import get_table, query_all

COLLECTION = "CATEGORIES"


class DynamoDBRoomCategoryRepository(RoomCategoryRepository):
    """DynamoDBを使用したRoomCategoryRepository の具象実装"""

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table = table if table is not None else get_table(table_name)

    def save(self, category: RoomCategory) -> None:
        """カテゴリをDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(category),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Room category already exists: {category.id}"
                )
            raise

    def find_by_id(self, category_id: CategoryId) -> RoomCategory | None:
        """カテゴリIDで検索"""
        response = self.table.get_item(
            Key={"PK": f"CATEGORY#{category_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[RoomCategory]:
        """全カテゴリを取得する"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(COLLECTION),
        )
        return [self._to_entity(item) for item in items]

    def update(self, category: RoomCategory) -> None:
        """カテゴリを更新する（存在しない場合はエラー）"""
        try:
            self.table.put_item(
                Item=self._to_item(category),
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException(
                    f"Room category not found: {category.id}"
                )
            raise

    def delete(self, category_id: CategoryId) -> None:
        """カテゴリを削除する"""
        self.table.delete_item(Key={"PK": f"CATEGORY#{category_id}", "SK": "METADATA"})

    def _to_item(self, category: RoomCategory) -> dict:
        return {
            "PK": f"CATEGORY#{category.id}",
            "SK": "METADATA",
            "entity_type": "CATEGORY",
            "category_id": str(category.id),
            "name": str(category.name),
            "status": category.status.value,
            "GSI1PK": COLLECTION,
            "GSI1SK": str(category.name).lower(),
        }

    def _to_entity(self, item: dict) -> RoomCategory:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return RoomCategory(
            id=CategoryId(value=item["category_id"]),
            name=CategoryName(value=item["name"]),
            status=CategoryStatus(item["status"]),
        )
