import json
from pathlib import Path
from typing import Any

from lnxconfig.core.model import Topology
from lnxconfig.utils.hashing import topology_fingerprint


def topology_payload(topology: Topology, source: Path | None = None) -> dict[str, Any]:
    return {
        "source": str(source) if source else None,
        "fingerprint": topology_fingerprint(topology),
        "topology": topology.to_dict(),
    }


def write_json_report(payload: dict, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
