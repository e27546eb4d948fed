from datetime import date
from decimal import Decimal

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from front_desk.category.domain import CategoryId
from front_desk.guest.domain import GrcNo
from front_desk.reservation.domain import (
    Reservation,
    ReservationId,
    ReservationRepository,
    ReservationStatus,
)
from front_desk.room.domain import RoomId
from front_desk.shared.domain import Currency, GuestDetails, Money, StayPeriod
from front_desk.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from front_desk.shared.infrastructure import get_table, query_all

COLLECTION = "RESERVATIONS"


class DynamoDBReservationRepository(ReservationRepository):
    """DynamoDBを使用したReservationRepository の具象実装"""

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table = table if table is not None else get_table(table_name)

    def save(self, reservation: Reservation) -> None:
        """仮予約をDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(reservation),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Reservation already exists: {reservation.id}"
                )
            raise

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """仮予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"RESERVATION#{reservation_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Reservation]:
        """全仮予約をチェックイン日の新しい順に取得する"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(COLLECTION),
            ScanIndexForward=False,
        )
        return [self._to_entity(item) for item in items]

    def update(self, reservation: Reservation) -> None:
        """仮予約を更新する（存在しない場合はエラー）"""
        try:
            self.table.put_item(
                Item=self._to_item(reservation),
                ConditionExpression=Attr("PK").exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException(
                    f"Reservation not found: {reservation.id}"
                )
            raise

    def delete(self, reservation_id: ReservationId) -> None:
        """仮予約を削除する"""
        self.table.delete_item(
            Key={"PK": f"RESERVATION#{reservation_id}", "SK": "METADATA"}
        )

    def _to_item(self, reservation: Reservation) -> dict:
        guest = reservation.guest
        stay = reservation.stay
        item = {
            "PK": f"RESERVATION#{reservation.id}",
            "SK": "METADATA",
            "entity_type": "RESERVATION",
            "reservation_id": str(reservation.id),
            "grc_no": str(reservation.grc_no),
            "booking_ref_no": reservation.booking_ref_no,
            "reservation_type": reservation.reservation_type,
            "salutation": guest.salutation,
            "guest_name": guest.name,
            "mobile_no": guest.mobile_no,
            "email": guest.email,
            "address": guest.address,
            "city": guest.city,
            "nationality": guest.nationality,
            "rate_amount": str(reservation.rate.amount),
            "currency": str(reservation.rate.currency),
            "number_of_rooms": reservation.number_of_rooms,
            "discount_percent": str(reservation.discount_percent),
            "advance_paid": str(reservation.advance_paid.amount),
            "payment_mode": reservation.payment_mode,
            "status": reservation.status.value,
            "cancellation_reason": reservation.cancellation_reason,
            "is_no_show": reservation.is_no_show,
            "GSI1PK": COLLECTION,
            "GSI1SK": f"{stay.check_in.isoformat() if stay.check_in else ''}"
            f"#{reservation.id}",
        }
        if reservation.category_id is not None:
            item["category_id"] = str(reservation.category_id)
        if reservation.room_id is not None:
            item["room_id"] = str(reservation.room_id)
        if stay.check_in is not None:
            item["check_in_date"] = stay.check_in.isoformat()
        if stay.check_out is not None:
            item["check_out_date"] = stay.check_out.isoformat()
        return item

    def _to_entity(self, item: dict) -> Reservation:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(item["currency"])
        check_in = item.get("check_in_date")
        check_out = item.get("check_out_date")
        category_id = item.get("category_id")
        room_id = item.get("room_id")
        return Reservation(
            id=ReservationId(value=item["reservation_id"]),
            grc_no=GrcNo(value=item["grc_no"]),
            guest=GuestDetails(
                name=item["guest_name"],
                salutation=item.get("salutation", ""),
                mobile_no=item.get("mobile_no", ""),
                email=item.get("email", ""),
                address=item.get("address", ""),
                city=item.get("city", ""),
                nationality=item.get("nationality", ""),
            ),
            stay=StayPeriod(
                check_in=date.fromisoformat(check_in) if check_in else None,
                check_out=date.fromisoformat(check_out) if check_out else None,
            ),
            rate=Money(amount=Decimal(item["rate_amount"]), currency=currency),
            booking_ref_no=item.get("booking_ref_no", ""),
            reservation_type=item.get("reservation_type", ""),
            category_id=CategoryId(value=category_id) if category_id else None,
            room_id=RoomId(value=room_id) if room_id else None,
            number_of_rooms=int(item.get("number_of_rooms", 1)),
            discount_percent=Decimal(item.get("discount_percent", "0")),
            advance_paid=Money(
                amount=Decimal(item.get("advance_paid", "0")), currency=currency
            ),
            payment_mode=item.get("payment_mode", ""),
            status=ReservationStatus(item["status"]),
            cancellation_reason=item.get("cancellation_reason", ""),
            is_no_show=bool(item.get("is_no_show", False)),
        )
