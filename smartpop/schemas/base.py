"""数据结构公共基类"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

# 必填文本：去除首尾空白后不能为空
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class RecordModel(BaseModel):
    """不可变记录基类，JSON 使用 camelCase 字段名"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class CommandModel(BaseModel):
    """命令基类，同时接受 camelCase 与 snake_case 输入"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)
