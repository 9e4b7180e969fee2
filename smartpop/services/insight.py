"""AI 生产分析

调用 Gemini generateContent REST 接口，根据最近的生产实绩生成简短分析。
调用失败时返回配置中的固定提示文字，不影响集计与报表。
"""

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import List, Optional, Sequence

import requests

from ..config.settings import settings
from ..exceptions import InsightUnavailableError
from ..schemas import DefectType, Item, ProductionLog, Snapshot, WorkOrder, WorkOrderStatus

logger = logging.getLogger(__name__)

RECENT_LOG_LIMIT = 10

PROMPT = "请根据提供的生产数据，用3句话总结当前生产状况的健康度，并提出1条改进建议。"

SYSTEM_TEMPLATE = """
You are a manufacturing expert analyzer. Analyze these production logs and defect data:
Items: {items}
Defect Types: {defect_types}
Recent Logs: {logs}
Active Orders: {orders}

IMPORTANT: You must respond in Chinese (中文).
Provide a professional analysis for the factory manager.
"""


def _dump(records: Sequence) -> str:
    return json.dumps([r.model_dump(mode="json", by_alias=True) for r in records], ensure_ascii=False)


class InsightGenerator(ABC):
    """分析生成器接口"""

    @abstractmethod
    def generate(
        self,
        recent_logs: List[ProductionLog],
        items: Sequence[Item],
        defect_types: Sequence[DefectType],
        active_orders: Sequence[WorkOrder],
    ) -> str:
        ...


class GeminiInsightGenerator(InsightGenerator):
    """基于 Gemini REST API 的实现"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_base: Optional[str] = None,
        timeout: Optional[float] = None,
        temperature: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.model = model or settings.INSIGHT_MODEL
        self.api_base = (api_base or settings.GEMINI_API_BASE).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.INSIGHT_TIMEOUT_SECONDS
        self.temperature = temperature if temperature is not None else settings.INSIGHT_TEMPERATURE
        self.session = session or requests.Session()

    def generate(self, recent_logs, items, defect_types, active_orders) -> str:
        if not self.api_key:
            raise InsightUnavailableError("GEMINI_API_KEY is not configured")

        system_text = SYSTEM_TEMPLATE.format(
            items=_dump(items),
            defect_types=_dump(defect_types),
            logs=_dump(recent_logs),
            orders=_dump(active_orders),
        )
        body = {
            "systemInstruction": {"parts": [{"text": system_text}]},
            "contents": [{"role": "user", "parts": [{"text": PROMPT}]}],
            "generationConfig": {"temperature": self.temperature},
        }
        url = f"{self.api_base}/models/{self.model}:generateContent"
        resp = self.session.post(
            url,
            params={"key": self.api_key},
            json=body,
            timeout=self.timeout,
        )
        resp.raise_for_status()
        data = resp.json()

        # candidates[0].content.parts[*].text
        candidates = data.get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(p.get("text", "") for p in parts).strip()


_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def _timestamp_key(log: ProductionLog) -> datetime:
    """时间戳排序键：按时刻比较，不带时区的视为 UTC，无法解析的排在最旧"""
    try:
        moment = datetime.fromisoformat(log.timestamp.replace("Z", "+00:00"))
    except ValueError:
        return _EPOCH
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def recent_logs(snapshot: Snapshot, limit: int = RECENT_LOG_LIMIT) -> List[ProductionLog]:
    """按时间戳取最近的若干条实绩"""
    return sorted(snapshot.production_logs, key=_timestamp_key, reverse=True)[:limit]


def active_orders(snapshot: Snapshot) -> List[WorkOrder]:
    return [o for o in snapshot.work_orders if o.status != WorkOrderStatus.COMPLETED]


def get_production_insight(generator: InsightGenerator, snapshot: Snapshot) -> str:
    """生成分析文字；任何失败都返回固定提示，不向调用方抛出"""
    try:
        text = generator.generate(
            recent_logs(snapshot),
            list(snapshot.items),
            list(snapshot.defect_types),
            active_orders(snapshot),
        )
    except InsightUnavailableError as exc:
        logger.warning("Insight generator unavailable: %s", exc)
        return settings.INSIGHT_ERROR_MESSAGE
    except requests.RequestException as exc:
        logger.warning("Insight request failed: %s", exc)
        return settings.INSIGHT_ERROR_MESSAGE
    except Exception:
        logger.exception("Unexpected insight generator error")
        return settings.INSIGHT_ERROR_MESSAGE
    return text or settings.INSIGHT_EMPTY_MESSAGE
