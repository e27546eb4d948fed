from datetime import date

from boto3.dynamodb.conditions import Key

from front_desk.guest.domain import (
    ContactDetails,
    GrcNo,
    Guest,
    GuestRepository,
    VisitStats,
)
from front_desk.shared.infrastructure import get_table, query_all

COLLECTION = "GUESTS"


class DynamoDBGuestRepository(GuestRepository):
    """DynamoDBを使用したGuestRepository の具象実装"""

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table = table if table is not None else get_table(table_name)

    def save(self, guest: Guest) -> None:
        """宿泊者をDBに保存する"""
        self.table.put_item(Item=self._to_item(guest))

    def find_by_id(self, grc_no: GrcNo) -> Guest | None:
        """GRC番号で検索"""
        response = self.table.get_item(
            Key={"PK": f"GUEST#{grc_no}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Guest]:
        """全宿泊者を取得する"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(COLLECTION),
        )
        return [self._to_entity(item) for item in items]

    def delete(self, grc_no: GrcNo) -> None:
        """宿泊者を削除する"""
        self.table.delete_item(Key={"PK": f"GUEST#{grc_no}", "SK": "METADATA"})

    def _to_item(self, guest: Guest) -> dict:
        item = {
            "PK": f"GUEST#{guest.id}",
            "SK": "METADATA",
            "entity_type": "GUEST",
            "grc_no": str(guest.id),
            "name": guest.name,
            "salutation": guest.salutation,
            "phone": guest.contact.phone,
            "email": guest.contact.email,
            "address": guest.contact.address,
            "city": guest.contact.city,
            "country": guest.contact.country,
            "total_visits": guest.visit_stats.total_visits,
            "GSI1PK": COLLECTION,
            "GSI1SK": f"{guest.name.lower()}#{guest.id}",
        }
        if guest.visit_stats.last_visit is not None:
            item["last_visit"] = guest.visit_stats.last_visit.isoformat()
        return item

    def _to_entity(self, item: dict) -> Guest:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        last_visit = item.get("last_visit")
        return Guest(
            id=GrcNo(value=item["grc_no"]),
            name=item["name"],
            salutation=item.get("salutation", ""),
            contact=ContactDetails(
                phone=item.get("phone", ""),
                email=item.get("email", ""),
                address=item.get("address", ""),
                city=item.get("city", ""),
                country=item.get("country", ""),
            ),
            visit_stats=VisitStats(
                total_visits=int(item.get("total_visits", 0)),
                last_visit=date.fromisoformat(last_visit) if last_visit else None,
            ),
        )
