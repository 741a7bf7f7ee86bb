"""Entities – Product and its selection cell."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from dataselect.selection import (
    Cell,
    CellTypeAdapter,
    MatchMode,
    PropertySpec,
    ValueKind,
    schema_of,
)


@dataclasses.dataclass(frozen=True)
class Product:
    id: str
    name: str
    status: str = ""
    product_category_id: str = ""
    protocol_name: str = ""
    device_type: str = ""
    rule_chain_id: str = ""
    owner: str = ""
    org_id: int | None = None
    create_time: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "productCategoryId": self.product_category_id,
            "protocolName": self.protocol_name,
            "deviceType": self.device_type,
            "ruleChainId": self.rule_chain_id,
            "owner": self.owner,
            "orgId": self.org_id,
            "createTime": self.create_time.isoformat() if self.create_time else None,
        }


class ProductCell(Cell[Product]):
    schema = schema_of(
        PropertySpec("name", ValueKind.STRING, MatchMode.CONTAINS, case_insensitive=True),
        PropertySpec("status", ValueKind.STRING),
        PropertySpec("productCategoryId", ValueKind.STRING),
        PropertySpec("protocolName", ValueKind.STRING),
        PropertySpec("deviceType", ValueKind.STRING),
        PropertySpec("owner", ValueKind.STRING),
        PropertySpec("orgId", ValueKind.NUMBER),
        PropertySpec("createTime", ValueKind.TIMESTAMP),
    )

    def _lookup(self, name: str) -> Any:
        p = self.item
        match name:
            case "name":
                return p.name
            case "status":
                return p.status
            case "productCategoryId":
                return p.product_category_id
            case "protocolName":
                return p.protocol_name
            case "deviceType":
                return p.device_type
            case "owner":
                return p.owner
            case "orgId":
                return p.org_id
            case "createTime":
                return p.create_time
        return None


class ProductCellAdapter(CellTypeAdapter[Product]):
    kind = "product"
    cell_type = ProductCell


__all__ = ["Product", "ProductCell", "ProductCellAdapter"]
