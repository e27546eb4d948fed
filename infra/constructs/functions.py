import datetime

from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# サービス名 -> (Construct ID, handler モジュール, 書き込みの有無)
HANDLERS: dict[str, list[tuple[str, str, bool]]] = {
    "category-service": [
        ("ListCategoriesLambda", "category.handlers.list_categories", False),
        ("CreateCategoryLambda", "category.handlers.create", True),
        ("UpdateCategoryLambda", "category.handlers.update", True),
        ("DeleteCategoryLambda", "category.handlers.delete", True),
    ],
    "room-service": [
        ("ListRoomsLambda", "room.handlers.list_rooms", False),
        ("CreateRoomLambda", "room.handlers.create", True),
        ("GetRoomLambda", "room.handlers.get", False),
        ("UpdateRoomLambda", "room.handlers.update", True),
        ("DeleteRoomLambda", "room.handlers.delete", True),
        ("AvailableRoomsLambda", "room.handlers.available", False),
        ("RoomCalendarLambda", "room.handlers.get_calendar", False),
    ],
    "booking-service": [
        ("ListBookingsLambda", "booking.handlers.list_bookings", False),
        ("CreateBookingLambda", "booking.handlers.create", True),
        ("GetBookingLambda", "booking.handlers.get", False),
        ("UpdateBookingStatusLambda", "booking.handlers.update_status", True),
        ("DeleteBookingLambda", "booking.handlers.delete", True),
        ("QuoteBookingLambda", "booking.handlers.quote", False),
    ],
    "reservation-service": [
        ("ListReservationsLambda", "reservation.handlers.list_reservations", False),
        ("CreateReservationLambda", "reservation.handlers.create", True),
        ("GetReservationLambda", "reservation.handlers.get", False),
        ("UpdateReservationLambda", "reservation.handlers.update", True),
        ("DeleteReservationLambda", "reservation.handlers.delete", True),
    ],
    "guest-service": [
        ("ListGuestsLambda", "guest.handlers.list_guests", False),
        ("GetGuestLambda", "guest.handlers.get", False),
    ],
    "dashboard-service": [
        ("DashboardLambda", "dashboard.handlers.get_summary", False),
    ],
}


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        hotel_timezone: str = "Asia/Kolkata",
        hotel_currency: str = "INR",
        cors_allow_origin: str = "*",
    ) -> None:
        super().__init__(scope, id)

        # NOTE: Construct ID をキーにして Api Construct から参照する
        self.functions: dict[str, _lambda.Function] = {}

        for service_name, handlers in HANDLERS.items():
            for fn_id, module, writes in handlers:
                fn = _lambda.Function(
                    self,
                    fn_id,
                    runtime=_lambda.Runtime.PYTHON_3_14,
                    handler=f"front_desk.{module}.lambda_handler",
                    code=_lambda.Code.from_asset("src"),
                    layers=[common_layer],
                    environment={
                        "TABLE_NAME": table.table_name,
                        "POWERTOOLS_SERVICE_NAME": service_name,
                        "HOTEL_TIMEZONE": hotel_timezone,
                        "HOTEL_CURRENCY": hotel_currency,
                        "CORS_ALLOW_ORIGIN": cors_allow_origin,
                        "DEPLOY_TIME": datetime.datetime.now(
                            datetime.timezone.utc
                        ).isoformat(),
                    },
                )
                if writes:
                    table.grant_read_write_data(fn)
                else:
                    table.grant_read_data(fn)
                self.functions[fn_id] = fn
