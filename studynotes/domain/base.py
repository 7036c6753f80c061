# studynotes/domain/base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON en camelCase; también se acepta snake_case al validar."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
