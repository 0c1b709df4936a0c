"""
Opaque instruction envelopes.
The `msg` field of cw20 `send` / cw721 `send_nft` and the LCD smart-query path
both carry a single-key JSON instruction encoded as base64 text.
"""

import base64
import json
from collections.abc import Mapping
from typing import Any


def _check_instruction(instruction: Any) -> None:
    if not isinstance(instruction, Mapping) or len(instruction) != 1:
        raise ValueError(f"Instruction must be a single-key mapping, got {instruction!r}")


def encode_msg(instruction: Mapping[str, Any]) -> str:
    _check_instruction(instruction)
    # Compact separators and insertion order keep the encoding deterministic.
    raw = json.dumps(instruction, separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_msg(payload: str) -> dict:
    instruction = json.loads(base64.b64decode(payload, validate=True).decode("utf-8"))
    _check_instruction(instruction)
    return instruction
