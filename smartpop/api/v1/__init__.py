from .reports import router as reports_router
from .records import router as records_router
from .master import router as master_router
from .work_orders import router as work_orders_router
from .production_logs import router as production_logs_router

__all__ = [
    "reports_router",
    "records_router",
    "master_router",
    "work_orders_router",
    "production_logs_router",
]
