# orderdesk/services/id_allocator.py
import random
import re

from orderdesk.domain.errors import OrderIdExhaustedError
from orderdesk.repos.order_repo import OrderRepo
from orderdesk.utils.settings import ORDER_ID_MAX_ATTEMPTS
from orderdesk.utils.logging import get_logger

logger = get_logger(__name__)

ORDER_ID_MIN = 10_000
ORDER_ID_MAX = 9_999_999
ORDER_ID_PATTERN = re.compile(r"[0-9]{5,7}")


def looks_like_order_id(value: str) -> bool:
    """Czysty numer 5-7 cyfr to publiczny order_id, wszystko inne to id wewnetrzne."""
    return ORDER_ID_PATTERN.fullmatch(value) is not None


class OrderIdAllocator:
    """
    Losuje krotki numer zamowienia z [10000, 9999999].
    Sprawdzenie w bazie to tylko skrot - ostateczna gwarancja to UNIQUE na orders.order_id.
    """

    def __init__(
        self,
        repo: OrderRepo,
        max_attempts: int = ORDER_ID_MAX_ATTEMPTS,
        rng: random.Random | None = None,
    ):
        self.repo = repo
        self.max_attempts = max_attempts
        self.rng = rng or random.SystemRandom()

    def candidate(self) -> str:
        return str(self.rng.randint(ORDER_ID_MIN, ORDER_ID_MAX))

    def allocate(self) -> str:
        for _ in range(self.max_attempts):
            order_id = self.candidate()
            if not self.repo.order_id_exists(order_id):
                return order_id
            logger.warning(f"Order id {order_id} already taken, drawing again")

        raise OrderIdExhaustedError(self.max_attempts)
