import json
from dataclasses import dataclass
from typing import Any, Union

MAX_DEPTH = 512


def _reject_constant(name: str):
    raise ValueError(f"Unexpected constant {name}")


def _nesting_depth(value: Any) -> int:
    """Deepest array/object nesting in a decoded value, walked without recursion."""
    deepest = 0
    stack = [(value, 1)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest


@dataclass(frozen=True)
class JsonCodec:
    """
    Stateless JSON encoder/decoder shared by a service instance.

    Decoding is strict: bodies must be UTF-8, NaN/Infinity are rejected and
    arrays/objects may nest at most ``max_depth`` levels.
    """

    ensure_ascii: bool = False
    max_depth: int = MAX_DEPTH

    def decode(self, raw: Union[bytes, str]) -> Any:
        """Decode a request body (raises ValueError on bad input)."""
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        try:
            content = json.loads(raw, parse_constant=_reject_constant)
        except RecursionError:
            raise ValueError(
                f"JSON text exceeds maximum nesting depth of {self.max_depth}"
            ) from None
        if _nesting_depth(content) > self.max_depth:
            raise ValueError(f"JSON text exceeds maximum nesting depth of {self.max_depth}")
        return content

    def encode(self, content: Any) -> str:
        """Encode a response body (raises TypeError/ValueError on bad input)."""
        return json.dumps(
            content, allow_nan=False, ensure_ascii=self.ensure_ascii, separators=(",", ":")
        )
