"""FastAPI主应用入口

提供作业指示、生产实绩、主数据的编辑接口以及集计报表/CSV导出
- 使用依赖注入管理数据库会话与快照存储
- 所有编辑都通过 reducer 生成新快照后整体保存
"""

import logging

from fastapi import Depends, FastAPI, HTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session

from .api.v1 import (
    master_router,
    production_logs_router,
    records_router,
    reports_router,
    work_orders_router,
)
from .config.settings import settings
from .database.connection import Base, engine, get_db
from . import models  # noqa: F401  注册 ORM 模型

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

try:
    Base.metadata.create_all(bind=engine)
except Exception as exc:
    logger.warning("Could not create tables on startup: %s", exc)

# 创建FastAPI应用实例
app = FastAPI(title=settings.APP_TITLE, description=settings.APP_DESCRIPTION, version=settings.APP_VERSION)

# 挂载API路由
app.include_router(reports_router, prefix="/api/v1")
app.include_router(records_router, prefix="/api/v1")
app.include_router(master_router, prefix="/api/v1")
app.include_router(work_orders_router, prefix="/api/v1")
app.include_router(production_logs_router, prefix="/api/v1")


# 健康检查端点
@app.get("/health/db")
def health_check(db: Session = Depends(get_db)):
    """检查数据库连接状态"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "reachable"}
    except Exception:
        raise HTTPException(status_code=503, detail="Database connection failed")


# 根路径 - 返回服务状态
@app.get("/")
def read_root():
    """返回服务运行状态"""
    return {"message": f"{settings.APP_TITLE} is running", "version": settings.APP_VERSION}
