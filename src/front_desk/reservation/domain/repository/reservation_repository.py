from abc import abstractmethod

from front_desk.reservation.domain.entity import Reservation
from front_desk.reservation.domain.value_object import ReservationId
from front_desk.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReservationId]):
    """仮予約リポジトリのインターフェース"""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        raise NotImplementedError

    @abstractmethod
    def update(self, reservation: Reservation) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, reservation_id: ReservationId) -> None:
        raise NotImplementedError
