from resp_decoder.data_types import Array, BulkString, DecodedValue

INDENT = "  "


def payload_text(value: DecodedValue) -> str:
    """Scalar payload of a value as text. Arrays and nulls have none."""
    if isinstance(value, Array) or value.value is None:
        return ""
    return value.value.decode("utf-8", errors="backslashreplace")


def render(value: DecodedValue, recursive: bool = False) -> list[str]:
    lines = [f"type: {value.prefix}"]

    if recursive:
        lines.extend(_render_tree(value))
    elif not isinstance(value, Array):
        lines.append(f"{payload_text(value)} @from value")
    else:
        for item in value.items or ():
            lines.append(f"{payload_text(item)} @from array value")

    return lines


def _render_tree(root: DecodedValue) -> list[str]:
    lines: list[str] = []
    pending = [(root, 0)]

    while pending:
        value, depth = pending.pop()
        pad = INDENT * depth

        match value:
            case Array(items=None) | BulkString(value=None):
                lines.append(f"{pad}{value.prefix} (nil)")
            case Array(items=()):
                lines.append(f"{pad}* (empty array)")
            case Array(items=items):
                lines.append(f"{pad}* {len(items)} items")
                pending.extend((item, depth + 1) for item in reversed(items))
            case _:
                lines.append(f"{pad}{value.prefix} {payload_text(value)}")

    return lines
