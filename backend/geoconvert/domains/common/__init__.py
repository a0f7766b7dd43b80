"""
共享領域模組

包含所有領域共用的模型和工具。
"""

# 從基本模型導出
from geoconvert.domains.common.models.base_model import (
    DomainBaseModel,
    ValueObject,
)

# 從結果工具導出
from geoconvert.domains.common.utils.result import (
    Result,
    ResultStatus,
    Error,
)
