import math
from dataclasses import dataclass

from front_desk.guest.domain import Guest, GuestRepository

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class GuestPage:
    guests: list[Guest]
    total: int
    page: int
    pages: int


class SearchGuestsService:
    """宿泊者検索のユースケース（氏名・電話番号、ページング付き）"""

    def __init__(self, repository: GuestRepository) -> None:
        self._repository = repository

    def search(
        self,
        name: str | None = None,
        phone: str | None = None,
        page: int = 1,
        limit: int = DEFAULT_LIMIT,
    ) -> GuestPage:
        if page < 1:
            raise ValueError("page must be 1 or greater")
        if not 1 <= limit <= MAX_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_LIMIT}")

        terms = [t for t in (name, phone) if t and t.strip()]
        guests = self._repository.find_all()
        if terms:
            guests = [g for g in guests if any(g.matches(t) for t in terms)]

        total = len(guests)
        start = (page - 1) * limit
        return GuestPage(
            guests=guests[start : start + limit],
            total=total,
            page=page,
            pages=math.ceil(total / limit),
        )
