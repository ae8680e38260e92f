from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class StationRecord(BaseModel):
    """Station as published upstream (`nid`/`title`); `id`/`name` also accepted."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(validation_alias=AliasChoices("nid", "id"))
    name: str = Field(validation_alias=AliasChoices("title", "name"))


class Station(BaseModel):
    id: str
    name: str
