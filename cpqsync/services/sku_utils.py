"""
Normalization helpers for SKU matching and XaitCPQ list responses.

Used by:
- CatalogSyncService (variant → part number, in-run dedup)
- XaitClient.find_part_by_sku (contains-fallback matching)
"""
from typing import Any, Dict, List, Optional, Union

# XaitCPQ list endpoints have returned rows under each of these keys
LIST_ITEM_KEYS = ("Items", "items", "Data")

# Field names a part's SKU has been seen under, in priority order
PART_SKU_FIELDS = ("PartNumber", "SKU", "Sku", "sku")


def normalize_sku(sku: Optional[str], variant_id: Optional[Union[str, int]] = None) -> Optional[str]:
    """
    Turn a Shopify variant SKU into the part number used on XaitCPQ.

    Examples:
        " BP-100 " -> "BP-100"
        "", 99 -> "SKU-99"
        "   ", None -> None
    """
    value = str(sku).strip() if sku is not None else ""
    if value:
        return value
    if variant_id is None or str(variant_id).strip() == "":
        return None
    return f"SKU-{str(variant_id).strip()}"


def sku_key(sku: Any) -> str:
    """Case- and whitespace-insensitive comparison key for a SKU."""
    if sku is None:
        return ""
    return str(sku).strip().upper()


def extract_list_items(body: Any) -> List[Dict[str, Any]]:
    """
    Pull the row list out of a XaitCPQ data list response.

    The rows may sit under ``Items``, ``items`` or ``Data``, or the body may
    be the list itself. The first non-empty list wins; anything else yields
    an empty list.
    """
    if isinstance(body, dict):
        for key in LIST_ITEM_KEYS:
            if isinstance(body.get(key), list) and body[key]:
                return body[key]
        return []
    if isinstance(body, list):
        return body
    return []


def part_sku(part: Dict[str, Any]) -> str:
    """Return the first populated SKU-like field of a XaitCPQ part row."""
    if not isinstance(part, dict):
        return ""
    for field in PART_SKU_FIELDS:
        if part.get(field) is not None:
            return str(part[field])
    return ""
