# catalog/sa/actions/library.py
"""Actions for Libraries, the top of the ownership hierarchy.

Libraries are not scoped by anything, so both ``name`` and ``scope`` are
unique across the whole catalog.
"""
from typing import Any, Dict, List, Mapping

from catalog.errors import BadRequest
from catalog.sa.actions.base import BaseActions, Options, Payload, UniqueKey, catalog_action
from catalog.sa.models import Library
from catalog.sa.queries import LibraryQueries
from catalog.schemas import LibraryAllOptions, LibraryCreate, LibraryFindOptions, LibraryUpdate
from catalog.validators import validate_library_scope


class LibraryActions(BaseActions):
    kind = 'Library'
    model = Library
    queries = LibraryQueries()
    all_options = LibraryAllOptions
    find_options = LibraryFindOptions
    create_schema = LibraryCreate
    update_schema = LibraryUpdate
    unique_keys = (('name',), ('scope',))
    scoped = False

    def validate(self, values: Dict[str, Any], context: str) -> None:
        scope = values.get('scope')
        if scope is not None and not validate_library_scope(scope):
            raise BadRequest(f"scope: Scope '{scope}' must not contain spaces", context)

    def not_unique_message(self, key: UniqueKey, candidate: Mapping[str, Any]) -> str:
        field = key[0]
        return f"{field}: Library {field} '{candidate[field]}' is already in use"

    @catalog_action
    def all(self, options: Options = None) -> List[Library]:
        return self._all(None, options)

    @catalog_action
    def find(self, library_id: int, options: Options = None) -> Library:
        return self._find(None, library_id, options)

    @catalog_action
    def exact(self, name: str, options: Options = None) -> Library:
        return self._exact(None, {'name': name}, name, options)

    @catalog_action
    def insert(self, data: Payload) -> Library:
        """Create a Library.

        Raises:
            BadRequest: If the scope contains whitespace
            NotUnique: If the name or scope is already in use
        """
        return self._insert(None, data)

    @catalog_action
    def update(self, library_id: int, data: Payload) -> Library:
        return self._update(None, library_id, data)

    @catalog_action
    def remove(self, library_id: int) -> Library:
        """Delete the Library along with everything it owns."""
        return self._remove(None, library_id)

    @catalog_action
    def authors(self, library_id: int, options: Options = None) -> List[Any]:
        self._find(None, library_id)
        return self.related('Author').all(library_id, options)

    @catalog_action
    def series(self, library_id: int, options: Options = None) -> List[Any]:
        self._find(None, library_id)
        return self.related('Series').all(library_id, options)

    @catalog_action
    def stories(self, library_id: int, options: Options = None) -> List[Any]:
        self._find(None, library_id)
        return self.related('Story').all(library_id, options)

    @catalog_action
    def volumes(self, library_id: int, options: Options = None) -> List[Any]:
        self._find(None, library_id)
        return self.related('Volume').all(library_id, options)
