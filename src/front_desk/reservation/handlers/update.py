from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from front_desk.reservation.applications.update_reservation import (
    UpdateReservationService,
)
from front_desk.reservation.domain import ReservationId
from front_desk.reservation.handlers.request_models import ReservationRequest
from front_desk.reservation.handlers.response_models import (
    ReservationData,
    ReservationResponse,
)
from front_desk.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from front_desk.room.domain import RoomId
from front_desk.room.infrastructure.dynamodb_room_repository import (
    DynamoDBRoomRepository,
)
from front_desk.shared.utils import api_error_handler, api_response, path_parameter

logger = Logger()

service = UpdateReservationService(
    repository=DynamoDBReservationRepository(),
    room_repository=DynamoDBRoomRepository(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@api_error_handler(logger)
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """仮予約更新 Lambda ハンドラ"""
    reservation_id = ReservationId(path_parameter(event, "reservation_id"))
    logger.info(
        "Received update reservation request",
        extra={"reservation_id": str(reservation_id)},
    )

    request = ReservationRequest.model_validate_json(event.body or "{}")
    reservation = service.update(
        reservation_id,
        request.to_details(),
        room_id=RoomId(request.room_id) if request.room_id else None,
    )
    return api_response(
        200,
        ReservationResponse(
            reservation=ReservationData.from_entity(reservation)
        ).to_body(),
    )
