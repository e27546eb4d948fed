from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.category.infrastructure.dynamodb_room_category_repository import (
    DynamoDBRoomCategoryRepository,
)
from front_desk.room.applications.search_available_rooms import (
    SearchAvailableRoomsService,
)
from front_desk.room.handlers.response_models import (
    AvailableRoomsResponse,
    RoomGroupData,
)
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.domain import StayPeriod
from front_desk.shared.utils import (
    api_error_handler,
    api_response,
    hotel_today,
    parse_iso_date,
    query_parameter,
)

logger = Logger()

service = SearchAvailableRoomsService(
    repository=DynamoDBRoomRepository(),
    category_repository=DynamoDBRoomCategoryRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """空室検索 Lambda ハンドラ

    ?date=YYYY-MM-DD で単日、?checkInDate=&checkOutDate= で滞在期間を指定する。
    ?all=true なら全客室のカテゴリ別一覧も返す。
    """
    query_date = parse_iso_date(query_parameter(event, "date"), "date")
    check_in = parse_iso_date(query_parameter(event, "checkInDate"), "checkInDate")
    check_out = parse_iso_date(query_parameter(event, "checkOutDate"), "checkOutDate")
    include_all = (query_parameter(event, "all") or "").lower() == "true"

    stay = StayPeriod(check_in=check_in, check_out=check_out) if check_in else None
    logger.info(
        "Searching available rooms",
        extra={"date": str(query_date), "check_in": str(check_in), "check_out": str(check_out)},
    )

    result = service.search(query_date=query_date, stay=stay, today=hotel_today())

    body = AvailableRoomsResponse(
        query_date=result.query_date,
        check_in_date=result.stay.check_in if result.stay else None,
        check_out_date=result.stay.check_out if result.stay else None,
        available_rooms=[RoomGroupData.from_group(g) for g in result.available],
        booked_rooms=[RoomGroupData.from_group(g) for g in result.booked_or_reserved],
        all_rooms=[RoomGroupData.from_group(g) for g in result.all_rooms]
        if include_all
        else None,
        available_count=result.available_count,
        total_count=result.total_count,
    )
    return api_response(200, body.to_body())
