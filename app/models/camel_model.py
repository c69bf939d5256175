from humps import camelize
from pydantic import BaseModel, ConfigDict


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=camelize, extra="ignore", populate_by_name=True
    )
