"""Entities – RuleChainMsgLog and its selection cell."""
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
class RuleChainMsgLog:
    """Message processed by a rule chain for one device."""
    id: str
    device_name: str
    msg_type: str
    msg: str = ""
    ts: datetime | None = None
    owner: str = ""
    role_id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "deviceName": self.device_name,
            "msgType": self.msg_type,
            "msg": self.msg,
            "ts": self.ts.isoformat() if self.ts else None,
            "owner": self.owner,
            "roleId": self.role_id,
        }


class RuleChainMsgLogCell(Cell[RuleChainMsgLog]):
    schema = schema_of(
        PropertySpec("deviceName", ValueKind.STRING, MatchMode.CONTAINS, case_insensitive=True),
        PropertySpec("msgType", ValueKind.STRING),
        PropertySpec("owner", ValueKind.STRING),
        PropertySpec("roleId", ValueKind.NUMBER),
        PropertySpec("ts", ValueKind.TIMESTAMP),
    )

    def _lookup(self, name: str) -> Any:
        log = self.item
        match name:
            case "deviceName":
                return log.device_name
            case "msgType":
                return log.msg_type
            case "owner":
                return log.owner
            case "roleId":
                return log.role_id
            case "ts":
                return log.ts
        return None


class RuleChainMsgLogCellAdapter(CellTypeAdapter[RuleChainMsgLog]):
    kind = "rulechain_msg_log"
    cell_type = RuleChainMsgLogCell


__all__ = ["RuleChainMsgLog", "RuleChainMsgLogCell", "RuleChainMsgLogCellAdapter"]
