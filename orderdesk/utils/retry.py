# orderdesk/utils/retry.py
from tenacity import retry, stop_after_attempt, wait_none, retry_if_exception_type

from orderdesk.domain.errors import DuplicateOrderIdError
from orderdesk.utils.settings import ORDER_ID_MAX_ATTEMPTS


#tenacity retry
#kolizja order_id wykryta przez UNIQUE w bazie -> losujemy od nowa, bez czekania
def order_id_retry(attempts: int = ORDER_ID_MAX_ATTEMPTS):
    return retry(
        reraise=True,
        stop=stop_after_attempt(attempts),
        wait=wait_none(),
        retry=retry_if_exception_type(DuplicateOrderIdError),
    )
