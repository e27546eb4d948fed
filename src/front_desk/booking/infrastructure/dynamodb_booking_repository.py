from datetime import date
from decimal import Decimal

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from front_desk.booking.domain import (
    Booking,
    BookingId,
    BookingRepository,
    BookingStatus,
)
from front_desk.guest.domain import GrcNo
from front_desk.room.domain import RoomId, RoomNumber
from front_desk.shared.domain import Currency, GuestDetails, Money, StayPeriod
from front_desk.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)
from front_desk.shared.infrastructure import get_table, query_all

COLLECTION = "BOOKINGS"


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装"""

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table = table if table is not None else get_table(table_name)

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        try:
            self.table.put_item(
                Item=self._to_item(booking),
                ConditionExpression=Attr("PK").not_exists(),
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                )
            raise

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": "METADATA"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_all(self) -> list[Booking]:
        """全予約を予約日の新しい順に取得する"""
        items = query_all(
            self.table,
            IndexName="GSI1",
            KeyConditionExpression=Key("GSI1PK").eq(COLLECTION),
            ScanIndexForward=False,
        )
        return [self._to_entity(item) for item in items]

    def find_active_by_room(self, room_id: RoomId) -> list[Booking]:
        """客室を押さえている有効な予約を取得する"""
        return [
            booking
            for booking in self.find_all()
            if booking.room_id == room_id and booking.is_active
        ]

    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        kwargs: dict = {
            "Key": {"PK": f"BOOKING#{booking.id}", "SK": "METADATA"},
            "UpdateExpression": "SET #status = :status",
            "ExpressionAttributeNames": {"#status": "status"},
            "ExpressionAttributeValues": {":status": booking.status.value},
        }

        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("status").eq(expected_status.value)

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status}, "
                    f"booking_id={booking.id}"
                )
            raise

    def delete(self, booking_id: BookingId) -> None:
        """予約を削除する"""
        self.table.delete_item(Key={"PK": f"BOOKING#{booking_id}", "SK": "METADATA"})

    def _to_item(self, booking: Booking) -> dict:
        guest = booking.guest
        item = {
            "PK": f"BOOKING#{booking.id}",
            "SK": "METADATA",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "grc_no": str(booking.grc_no),
            "booking_date": booking.booking_date.isoformat(),
            "salutation": guest.salutation,
            "guest_name": guest.name,
            "mobile_no": guest.mobile_no,
            "email": guest.email,
            "address": guest.address,
            "city": guest.city,
            "nationality": guest.nationality,
            "room_id": str(booking.room_id),
            "room_number": str(booking.room_number),
            "rate_amount": str(booking.rate.amount),
            "currency": str(booking.rate.currency),
            "number_of_rooms": booking.number_of_rooms,
            "discount_percent": str(booking.discount_percent),
            "advance_paid": str(booking.advance_paid.amount),
            "payment_mode": booking.payment_mode,
            "status": booking.status.value,
            "GSI1PK": COLLECTION,
            "GSI1SK": f"{booking.booking_date.isoformat()}#{booking.id}",
        }
        if booking.stay.check_in is not None:
            item["check_in_date"] = booking.stay.check_in.isoformat()
        if booking.stay.check_out is not None:
            item["check_out_date"] = booking.stay.check_out.isoformat()
        return item

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(item["currency"])
        check_in = item.get("check_in_date")
        check_out = item.get("check_out_date")
        return Booking(
            id=BookingId(value=item["booking_id"]),
            grc_no=GrcNo(value=item["grc_no"]),
            booking_date=date.fromisoformat(item["booking_date"]),
            guest=GuestDetails(
                name=item["guest_name"],
                salutation=item.get("salutation", ""),
                mobile_no=item.get("mobile_no", ""),
                email=item.get("email", ""),
                address=item.get("address", ""),
                city=item.get("city", ""),
                nationality=item.get("nationality", ""),
            ),
            room_id=RoomId(value=item["room_id"]),
            room_number=RoomNumber(value=item["room_number"]),
            stay=StayPeriod(
                check_in=date.fromisoformat(check_in) if check_in else None,
                check_out=date.fromisoformat(check_out) if check_out else None,
            ),
            rate=Money(amount=Decimal(item["rate_amount"]), currency=currency),
            number_of_rooms=int(item.get("number_of_rooms", 1)),
            discount_percent=Decimal(item.get("discount_percent", "0")),
            advance_paid=Money(
                amount=Decimal(item.get("advance_paid", "0")), currency=currency
            ),
            payment_mode=item.get("payment_mode", ""),
            status=BookingStatus(item["status"]),
        )
