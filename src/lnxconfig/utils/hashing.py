from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lnxconfig.core.model import Topology


def sha256_text(value: str) -> str:
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def sha256_json(value: Any) -> str:
    payload = json.dumps(value, sort_keys=True, separators=(",", ":"))
    return sha256_text(payload)


def topology_fingerprint(topology: Topology) -> str:
    # list order is preserved by json.dumps, so declaration order is part of the digest
    return sha256_json(topology.to_dict())
