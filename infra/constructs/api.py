from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# (リソースパス, HTTP メソッド, Construct ID)
ROUTES: list[tuple[str, str, str]] = [
    ("room-categories", "GET", "ListCategoriesLambda"),
    ("room-categories", "POST", "CreateCategoryLambda"),
    ("room-categories/{category_id}", "PUT", "UpdateCategoryLambda"),
    ("room-categories/{category_id}", "DELETE", "DeleteCategoryLambda"),
    ("rooms", "GET", "ListRoomsLambda"),
    ("rooms", "POST", "CreateRoomLambda"),
    ("rooms/available", "GET", "AvailableRoomsLambda"),
    ("rooms/{room_id}", "GET", "GetRoomLambda"),
    ("rooms/{room_id}", "PUT", "UpdateRoomLambda"),
    ("rooms/{room_id}", "DELETE", "DeleteRoomLambda"),
    ("rooms/{room_id}/calendar", "GET", "RoomCalendarLambda"),
    ("bookings", "GET", "ListBookingsLambda"),
    ("bookings", "POST", "CreateBookingLambda"),
    ("bookings/quote", "POST", "QuoteBookingLambda"),
    ("bookings/delete/{booking_id}", "DELETE", "DeleteBookingLambda"),
    ("bookings/{booking_id}", "GET", "GetBookingLambda"),
    ("bookings/{booking_id}/status", "PATCH", "UpdateBookingStatusLambda"),
    ("reservation", "GET", "ListReservationsLambda"),
    ("reservation", "POST", "CreateReservationLambda"),
    ("reservation/{reservation_id}", "GET", "GetReservationLambda"),
    ("reservation/{reservation_id}", "PUT", "UpdateReservationLambda"),
    ("reservation/{reservation_id}", "DELETE", "DeleteReservationLambda"),
    ("guests", "GET", "ListGuestsLambda"),
    ("guests/{grc_no}", "GET", "GetGuestLambda"),
    ("dashboard", "GET", "DashboardLambda"),
]


class Api(Construct):
    """API Gateway Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        functions: dict[str, _lambda.Function],
        allow_origins: list[str] | None = None,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "FrontDeskRestApi",
            rest_api_name="Hotel Front Desk API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=allow_origins or apigw.Cors.ALL_ORIGINS,
                allow_methods=apigw.Cors.ALL_METHODS,
            ),
        )

        # /api/... 配下にルートを作る
        api_root = self.rest_api.root.add_resource("api")
        for path, method, fn_id in ROUTES:
            resource = api_root.resource_for_path(path)
            resource.add_method(method, apigw.LambdaIntegration(functions[fn_id]))
