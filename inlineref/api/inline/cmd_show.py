"""Show the reference records owned by one entity field.

CLI: irefc ref show --owner-type T --owner-id I --field F
"""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from . import RefShowOutput
from ._open_store import _open_store, _owner_from_args


def cmd_show(owner_type: str, owner_id: str, field: str) -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.InlineRefConfig import InlineRefConfig

        owner_label = f"{owner_type} id: {owner_id} field: {field}"

        yield (0.2, "Loading configuration...")
        try:
            config = InlineRefConfig.load()
            owner = _owner_from_args(owner_type, owner_id, field)
            yield (0.6, f"Loading refs for {owner}...")
            with _open_store(config) as store:
                records = sorted(store.find_for_owner(owner), key=lambda record: record.id or 0)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Query failed: {e}"
            result_obj.output = RefShowOutput(errors=[str(e)], owner=owner_label, count=0, refs=[]).model_dump(
                mode="python"
            )
            result_obj.success = False
            return

        refs: list[dict[str, Any]] = []
        for record in records:
            entry = record.model_dump(mode="json", exclude={"owner"})
            entry["referable"] = record.referable.model_dump(mode="json") if record.referable else None
            refs.append(entry)

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(refs)} ref(s) for {owner}"
        result_obj.output = RefShowOutput(owner=str(owner), count=len(refs), refs=refs).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Showing refs for {owner_type} {owner_id} {field}...",
        progress_callback=do_work,
    )
