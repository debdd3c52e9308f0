"""Render reference tokens back into markup.

CLI: irefc ref render <path> --owner-type T --owner-id I --field F [--editor-markers] [--nullify]
"""

from collections.abc import Iterator
from pathlib import Path

from ..StageResult import StageResult
from . import RefRenderOutput
from ._open_store import _open_store, _owner_from_args
from .InlineRefRenderer import InlineRefRenderer


def cmd_render(
    path: str,
    owner_type: str,
    owner_id: str,
    field: str,
    editor_markers: bool = False,
    nullify: bool = False,
) -> StageResult:
    """Render the normalized text in `path` using the owner field's reference records."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.InlineRefConfig import InlineRefConfig

        owner_label = f"{owner_type} id: {owner_id} field: {field}"

        def fail(message: str, error: str) -> None:
            result_obj.result = message
            result_obj.output = RefRenderOutput(errors=[error], owner=owner_label, html="").model_dump(mode="python")
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = InlineRefConfig.load()
            owner = _owner_from_args(owner_type, owner_id, field)
        except ValueError as e:
            yield (1.0, "Complete")
            fail(f"Cannot render: {e}", str(e))
            return

        yield (0.3, f"Reading {path}...")
        text_path = Path(path).expanduser()
        if not text_path.is_file():
            yield (1.0, "Complete")
            fail(f"File not found: {path}", "Path does not exist")
            return
        text = text_path.read_text(encoding="utf-8")

        yield (0.6, "Rendering references...")
        try:
            with _open_store(config) as store:
                rendered = InlineRefRenderer(store).render_text(
                    text, owner, include_editor_markers=editor_markers, options={"nullify": nullify}
                )
        except Exception as e:
            yield (1.0, "Complete")
            fail(f"Render failed: {e}", str(e))
            return

        yield (1.0, "Complete")
        result_obj.result = f"Rendered {path} for {owner}"
        result_obj.output = RefRenderOutput(owner=str(owner), html=rendered).model_dump(mode="python")
        result_obj.success = True

    return StageResult(announce=f"Rendering references in {path}...", progress_callback=do_work)
