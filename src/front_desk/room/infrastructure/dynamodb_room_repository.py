from datetime import date
from decimal import Decimal

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from front_desk.category.domain import CategoryId
from front_desk.room.domain import Room, RoomId, RoomNumber, RoomRepository, RoomStatus
from front_desk.shared.domain import Currency, Money
from front_desk.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from front_desk.shared.infrastructure import get_table, query_all

COLLECTION = "ROOMS"


class DynamoDBRoomRepository(RoomRepository):
    """DynamoDBを使用したRoomRepository の具象実装"""

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table = table if table is not None else get_table(table_name)

    def save(self, room: Room) -> None:
        """客室をDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(room),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Room already exists: {room.id}")
            raise

    def find_by_id(self, room_id: RoomId) -> Room | None:
        """客室IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"ROOM#{room_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Room]:
        """全客室を取得する"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(COLLECTION),
        )
        return [self._to_entity(item) for item in items]

    def find_by_category(self, category_id: CategoryId) -> list[Room]:
        """カテゴリに属する客室を取得する"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(COLLECTION),
            FilterExpression=Attr("category_id").eq(str(category_id)),
        )
        return [self._to_entity(item) for item in items]

    def update(self, room: Room) -> None:
        """客室を更新する（存在しない場合はエラー）"""
        try:
            self.table.put_item(
                Item=self._to_item(room),
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException(f"Room not found: {room.id}")
            raise

    def delete(self, room_id: RoomId) -> None:
        """客室を削除する"""
        self.table.delete_item(Key={"PK": f"ROOM#{room_id}", "SK": "METADATA"})

    def _to_item(self, room: Room) -> dict:
        item = {
            "PK": f"ROOM#{room.id}",
            "SK": "METADATA",
            "entity_type": "ROOM",
            "room_id": str(room.id),
            "room_number": str(room.room_number),
            "title": room.title,
            "category_id": str(room.category_id),
            "price_amount": str(room.price.amount),
            "price_currency": str(room.price.currency),
            "floor": room.floor,
            "status": room.status.value,
            "is_oos": room.is_oos,
            "extra_bed": room.extra_bed,
            "reserved_dates": [d.isoformat() for d in room.reserved_dates],
            "GSI1PK": COLLECTION,
            "GSI1SK": str(room.room_number),
        }
        if room.booked_till_date is not None:
            item["booked_till_date"] = room.booked_till_date.isoformat()
        return item

    def _to_entity(self, item: dict) -> Room:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        booked_till = item.get("booked_till_date")
        return Room(
            id=RoomId(value=item["room_id"]),
            room_number=RoomNumber(value=item["room_number"]),
            title=item.get("title", ""),
            category_id=CategoryId(value=item["category_id"]),
            price=Money(
                amount=Decimal(item["price_amount"]),
                currency=Currency(item["price_currency"]),
            ),
            floor=int(item.get("floor", 1)),
            status=RoomStatus(item["status"]),
            is_oos=bool(item.get("is_oos", False)),
            extra_bed=bool(item.get("extra_bed", False)),
            booked_till_date=date.fromisoformat(booked_till) if booked_till else None,
            reserved_dates=[date.fromisoformat(d) for d in item.get("reserved_dates", [])],
        )
