"""Resolve editor markup into reference tokens.

CLI: irefc ref resolve <path> --owner-type T --owner-id I --field F
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import RefResolveOutput
from ._open_store import _open_store, _owner_from_args
from .InlineRefResolver import InlineRefResolver


def cmd_resolve(path: str, owner_type: str, owner_id: str, field: str) -> StageResult:
    """Resolve the markup in `path` for the given owner field and persist its references."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.InlineRefConfig import InlineRefConfig

        owner_label = f"{owner_type} id: {owner_id} field: {field}"

        yield (0.1, "Loading configuration...")
        try:
            config = InlineRefConfig.load()
            owner = _owner_from_args(owner_type, owner_id, field)
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Cannot resolve: {e}"
            result_obj.output = RefResolveOutput(errors=[str(e)], owner=owner_label, text="", touched=[]).model_dump(
                mode="python"
            )
            result_obj.success = False
            return

        yield (0.3, f"Reading {path}...")
        markup_path = Path(path).expanduser()
        if not markup_path.is_file():
            yield (1.0, "Complete")
            result_obj.result = f"File not found: {path}"
            result_obj.output = RefResolveOutput(
                errors=["Path does not exist"], owner=owner_label, text="", touched=[]
            ).model_dump(mode="python")
            result_obj.success = False
            return
        markup = markup_path.read_text(encoding="utf-8")

        yield (0.5, "Resolving references...")
        try:
            with _open_store(config) as store:
                resolved = InlineRefResolver(store).resolve_for_owner(markup, owner)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Resolve failed: {e}"
            result_obj.output = RefResolveOutput(errors=[str(e)], owner=owner_label, text="", touched=[]).model_dump(
                mode="python"
            )
            result_obj.success = False
            return

        yield (1.0, "Complete")
        ref_word = "reference" if len(resolved.touched) == 1 else "references"
        result_obj.result = f"Resolved {len(resolved.touched)} {ref_word} for {owner}"
        result_obj.output = RefResolveOutput(
            owner=str(owner),
            text=resolved.text,
            touched=resolved.touched,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Resolving references in {path}...", progress_callback=do_work)
