"""Open the reference and referable collections as one store."""

from collections.abc import Iterator
from contextlib import contextmanager

from ..config.InlineRefConfig import InlineRefConfig
from ..database.Database import Database
from ..referable.ReferableStore import ReferableStore
from ..ref.OwnerRef import OwnerRef
from ..ref.ReferenceStore import ReferenceStore

REFS_DATABASE = "refs"
REFERABLES_DATABASE = "referables"


@contextmanager
def _open_store(config: InlineRefConfig) -> Iterator[ReferenceStore]:
    with Database(config.database, REFS_DATABASE) as refs_db:
        with Database(config.database, REFERABLES_DATABASE) as referables_db:
            yield ReferenceStore(refs_db, ReferableStore(referables_db))


def _owner_from_args(owner_type: str, owner_id: str, field: str) -> OwnerRef:
    """Numeric ids from the command line are matched as integers."""
    entity_id: int | str = int(owner_id) if owner_id.isdigit() else owner_id
    return OwnerRef(entity_id=entity_id, entity_type=owner_type, field_name=field)
