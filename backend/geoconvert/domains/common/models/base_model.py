from pydantic import BaseModel, ConfigDict


class DomainBaseModel(BaseModel):
    """所有領域模型的基類"""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        populate_by_name=True,
        validate_assignment=True,
    )


class ValueObject(DomainBaseModel):
    """值對象基類，不可變且通過其屬性值來定義相等性"""

    model_config = ConfigDict(frozen=True)
