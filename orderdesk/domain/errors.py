# orderdesk/domain/errors.py


class OrderError(Exception):
    """Bazowy wyjatek domeny zamowien."""


class EmptyCartError(OrderError):
    def __init__(self):
        super().__init__("Cart is empty")


class InvalidStatusError(OrderError):
    def __init__(self, status):
        super().__init__(f"Invalid order status: {status!r}")
        self.status = status


class OrderNotFoundError(OrderError):
    def __init__(self, ref: str):
        super().__init__("Order not found")
        self.ref = ref


class DuplicateOrderIdError(OrderError):
    """Baza odrzucila insert, bo order_id jest juz zajety (UNIQUE)."""

    def __init__(self, order_id: str):
        super().__init__(f"Order id {order_id} already exists")
        self.order_id = order_id


class OrderIdExhaustedError(OrderError):
    """Nie udalo sie znalezc wolnego order_id w limicie prob."""

    def __init__(self, attempts: int):
        super().__init__(f"Could not allocate a unique order id after {attempts} attempts")
        self.attempts = attempts
