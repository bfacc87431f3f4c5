from pathlib import Path


def render_markdown_report(payload: dict) -> str:
    summary = payload.get("summary", {})
    lines = ["# lnx lint report", ""]
    if summary.get("source"):
        lines.append(f"Source: `{summary['source']}`")
        lines.append("")
    lines.append("## Summary")
    lines.append(f"- Exit code: {summary.get('exit_code', 1)}")
    lines.append(f"- Status counts: {summary.get('counts_by_status', {})}")
    lines.append("")
    lines.append("## Results")

    grouped: dict[str, list[dict]] = {}
    for item in payload.get("results", []):
        grouped.setdefault(item.get("phase", "other"), []).append(item)

    for check, items in grouped.items():
        lines.append(f"### {check}")
        for item in items:
            lines.append(f"- **{item['status']}** `{item['name']}`: {item['message']}")
        lines.append("")
    return "\n".join(lines)


def write_markdown_report(payload: dict, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_markdown_report(payload), encoding="utf-8")
