from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.reservation.applications.delete_reservation import (
    DeleteReservationService,
)
from front_desk.reservation.domain import ReservationId
from front_desk.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, path_parameter

logger = Logger()

service = DeleteReservationService(
    repository=DynamoDBReservationRepository(),
    room_repository=DynamoDBRoomRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """仮予約削除 Lambda ハンドラ"""
    reservation_id = ReservationId(path_parameter(event, "reservation_id"))
    logger.info("Deleting reservation", extra={"reservation_id": str(reservation_id)})

    service.delete(reservation_id)
    return api_response(200, {"success": True, "message": "Reservation deleted"})
