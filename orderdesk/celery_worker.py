# orderdesk/celery_worker.py
from celery import Celery

from orderdesk.utils.settings import (
    CELERY_BROKER_URL,
    CELERY_RESULT_BACKEND,
)

celery_app = Celery(
    "orders",
    broker=CELERY_BROKER_URL,
    backend=CELERY_RESULT_BACKEND,
)

# WAŻNE: Explicite importuj taski, żeby Celery je zarejestrował
celery_app.conf.imports = (
    "orderdesk.services.notification_service",
)

# powiadomienie jest best-effort, nikt nie czeka na wynik
celery_app.conf.task_ignore_result = True
# zawsze przez brokera - SMTP nie moze blokowac tworzenia zamowienia
celery_app.conf.task_always_eager = False
celery_app.conf.timezone = "UTC"
