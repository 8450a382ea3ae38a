# name_api/models/name.py

from pydantic import BaseModel, ConfigDict


class ConfiguredName(BaseModel):
    value: str

    model_config = ConfigDict(frozen=True)
