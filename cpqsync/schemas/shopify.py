# File: cpqsync/schemas/shopify.py

from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional, List, Union


class ShopifyVariant(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    sku: Optional[str] = None


class ShopifyProduct(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    title: str = ""
    body_html: Optional[str] = None
    variants: List[ShopifyVariant] = []

    @field_validator('title', mode='before')
    @classmethod
    def validate_title(cls, v):
        return "" if v is None else v

    @field_validator('variants', mode='before')
    @classmethod
    def validate_variants(cls, v):
        return [] if v is None else v
