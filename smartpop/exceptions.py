"""领域异常定义"""


class SmartPopError(Exception):
    """所有业务异常的基类"""


class RecordValidationError(SmartPopError):
    """必填字段缺失等校验失败，快照不做任何修改"""


class EntityNotFoundError(SmartPopError):
    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} not found: {entity_id}")


class SelfDeletionError(SmartPopError):
    """当前操作者不能删除自己的账号"""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"cannot delete the active operator: {user_id}")


class SnapshotCorruptedError(SmartPopError):
    """已保存的快照无法解析"""


class InsightUnavailableError(SmartPopError):
    """AI 分析服务不可用（未配置或调用失败）"""
