# File: cpqsync/schemas/xait.py

from pydantic import BaseModel, ConfigDict, Field


class XaitPart(BaseModel):
    """Part payload accepted by the XaitCPQ /part endpoints"""
    model_config = ConfigDict(populate_by_name=True)

    part_number: str = Field(alias="PartNumber")
    name: str = Field(default="", alias="Name")
    description: str = Field(default="", alias="Description")
    active: bool = Field(default=True, alias="Active")
    saleable: bool = Field(default=True, alias="Saleable")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
