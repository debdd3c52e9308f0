"""HTML to reference-token transform."""

import logging
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from ..markup.MarkupDocument import MarkupDocument
from ..markup.MarkupNode import MarkupNode
from ..referable.UriReferable import URI_REFERABLE_TYPE, UriReferable
from ..ref._grammar import REF_ID_MARKER, REFERABLE_ID_MARKER, REFERABLE_TYPE_MARKER, close_token, open_token
from ..ref.OwnerRef import OwnerRef
from ..ref.ReferenceRecord import ReferenceRecord
from ..ref.ReferenceStore import ReferenceStore
from ..ref.RefKind import RefKind


class _TagSpec(NamedTuple):
    tag: str
    kind: RefKind
    source_attribute: str
    keeps_inner_content: bool


# Order matters: links are resolved before images
_TAG_SPECS: tuple[_TagSpec, ...] = (
    _TagSpec("a", RefKind.LINK, "href", True),
    _TagSpec("img", RefKind.IMAGE, "src", False),
)


@dataclass
class ResolveResult:
    """Normalized text and the reference identities it contains, in encounter order."""

    text: str
    touched: list[int] = field(default_factory=list)


class InlineRefResolver:
    """Replace marked links and images by `[REF:id]` tokens.

    Every marked element becomes a saved reference record. Records the owner
    field held before the call but no longer contains are destroyed.
    """

    def __init__(self, store: ReferenceStore, logger: logging.Logger | None = None):
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    def resolve(self, markup: str, owner_entity: Any, owner_field: str) -> ResolveResult:
        return self.resolve_for_owner(markup, OwnerRef.of(owner_entity, owner_field))

    def resolve_for_owner(self, markup: str, owner: OwnerRef | None) -> ResolveResult:
        """Resolve `markup` for `owner`.

        An owner of None is an unsaved entity: it has no records yet, and
        saving the first marked node raises `pydantic.ValidationError`.
        """
        before = self.store.ids_for_owner(owner) if owner is not None else []
        document = MarkupDocument(markup)
        touched: list[int] = []

        for spec in _TAG_SPECS:
            for node in document.select(spec.tag, REFERABLE_TYPE_MARKER):
                record = self._resolve_node(node, spec, owner)
                if spec.keeps_inner_content:
                    node.wrap_content(open_token(record.id), close_token(record.id))  # type: ignore[arg-type]
                else:
                    node.replace(open_token(record.id))  # type: ignore[arg-type]
                touched.append(record.id)  # type: ignore[arg-type]

        kept = set(touched)
        orphaned = [ref_id for ref_id in before if ref_id not in kept]
        if orphaned:
            destroyed = self.store.destroy_many(orphaned)
            self.logger.debug(f"[InlineRef] Destroying refs for {owner}. Refs destroyed: {destroyed}")

        return ResolveResult(text=document.serialize(), touched=touched)

    def _resolve_node(self, node: MarkupNode, spec: _TagSpec, owner: OwnerRef | None) -> ReferenceRecord:
        ref_id, referable_id, referable_type = [
            node.remove_attribute(name) for name in (REF_ID_MARKER, REFERABLE_ID_MARKER, REFERABLE_TYPE_MARKER)
        ]
        referable_params = {"uri": node.get_attribute(spec.source_attribute)}
        node.remove_attribute(spec.source_attribute)
        options = node.attributes

        record = None
        if ref_id.isdigit() and owner is not None:
            record = self.store.find_by_id_for_owner(spec.kind, int(ref_id), owner)
        if record is None:
            record = ReferenceRecord(kind=spec.kind)

        record.retarget(referable_id, referable_type, options, owner)

        if record.referable_type == URI_REFERABLE_TYPE:
            record.referable = self._uri_referable_for(record)
            for name, value in referable_params.items():
                if name in type(record.referable).model_fields:
                    setattr(record.referable, name, value)
        else:
            record.referable = None

        return self.store.save(record)

    def _uri_referable_for(self, record: ReferenceRecord) -> UriReferable:
        """Reload the named URI referable, or start a new one.

        A referable already owned by another record is never shared; the
        record gets a fresh one instead.
        """
        referables = self.store.referables
        referable = referables.reload(URI_REFERABLE_TYPE, record.referable_id)
        if referable is not None:
            claimants = self.store.claimants(URI_REFERABLE_TYPE, referable.id)  # type: ignore[arg-type]
            if any(claimant != record.id for claimant in claimants):
                self.logger.debug(f"Referable {referable.id} is owned by refs {claimants}; not sharing it")
                referable = None
        if referable is None:
            referable = referables.new(URI_REFERABLE_TYPE)
        return referable
