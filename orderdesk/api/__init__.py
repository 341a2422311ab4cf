# orderdesk/api/__init__.py
from orderdesk.api.routers import health, orders

ROUTERS = (health.router, orders.router)
