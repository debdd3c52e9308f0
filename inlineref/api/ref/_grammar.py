"""Marker attributes and reference tokens shared by both transform directions."""

import re

REF_ID_MARKER = "skyline-ref-id"
REFERABLE_ID_MARKER = "skyline-referable-id"
REFERABLE_TYPE_MARKER = "skyline-referable-type"

OPEN_TOKEN_PATTERN = re.compile(r"\[REF:(\d+)\]")
CLOSE_TOKEN_PATTERN = re.compile(r"\[/REF:(\d+)\]")


def open_token(ref_id: int) -> str:
    return f"[REF:{ref_id}]"


def close_token(ref_id: int) -> str:
    return f"[/REF:{ref_id}]"
