# catalog/sa/actions/base.py
import functools
import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Type, Union
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.errors import BadRequest, CatalogError, NotFound, NotUnique, ServerError
from catalog.sa.links import LinkManager
from catalog.sa.queries import QueryBuilder
from catalog.sa.uniqueness import UniquenessValidator

logger = logging.getLogger(__name__)

Options = Union[BaseModel, Mapping[str, Any], None]
Payload = Union[BaseModel, Mapping[str, Any]]
UniqueKey = Tuple[str, ...]


def catalog_action(func):
    """Action boundary: catalog errors pass through untouched, storage
    failures are rolled back and reported once as ServerError."""
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            return func(self, *args, **kwargs)
        except CatalogError:
            raise
        except SQLAlchemyError as error:
            self.session.rollback()
            context = self.context(func.__name__)
            logger.error(f"Error in {context}: {str(error)}")
            raise ServerError(error, context) from error
    return wrapper


def describe_validation_error(error: ValidationError) -> str:
    """Render the first pydantic error as "<field>: <reason>"."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or "data"
    return f"{field}: {first.get('msg', 'Invalid value')}"


class BaseActions:
    """Shared machinery for the per-entity action classes.

    Subclasses describe their entity declaratively (model, query builder,
    option and payload schemas, unique keys) and expose the public
    operations with the signature that fits their scoping.
    """

    kind: str = ""
    model: Any = None
    queries: QueryBuilder = QueryBuilder()
    all_options: Type[BaseModel] = BaseModel
    find_options: Type[BaseModel] = BaseModel
    create_schema: Type[BaseModel] = BaseModel
    update_schema: Type[BaseModel] = BaseModel

    # Each key is a group of columns that must be unique together
    unique_keys: Sequence[UniqueKey] = (('name',),)

    # True when uniqueness is scoped by the owning Library
    scoped: bool = True

    _registry: Dict[str, Type["BaseActions"]] = {}

    def __init__(self, session: Session):
        """Initialize the actions with a database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session
        self.unique = UniquenessValidator(session)
        self.links = LinkManager(session)

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.kind:
            BaseActions._registry[cls.kind] = cls

    def related(self, kind: str) -> "BaseActions":
        """Actions for another entity kind, sharing this session"""
        return self._registry[kind](self.session)

    def context(self, name: str) -> str:
        return f"{type(self).__name__}.{name}"

    # Hooks ---------------------------------------------------------------

    def validate(self, values: Dict[str, Any], context: str) -> None:
        """Domain validation of supplied values; raise BadRequest on failure"""
        pass

    def prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        """Last transformation of values before they are written"""
        return values

    def not_unique_message(self, key: UniqueKey, candidate: Mapping[str, Any]) -> str:
        field = key[0]
        value = " ".join(str(candidate[column]) for column in key)
        suffix = " in this Library" if self.scoped else ""
        return f"{field}: {self.kind} {field} '{value}' is already in use{suffix}"

    # Coercion ------------------------------------------------------------

    def options(self, options_class: Type[BaseModel], options: Options, context: str) -> BaseModel:
        if options is None:
            return options_class()
        if isinstance(options, options_class):
            return options
        if isinstance(options, BaseModel):
            options = options.model_dump(exclude_unset=True)
        try:
            return options_class.model_validate(options)
        except ValidationError as error:
            raise BadRequest(describe_validation_error(error), context) from error

    def payload(self, schema: Type[BaseModel], data: Payload, context: str) -> BaseModel:
        if isinstance(data, schema):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump(exclude_unset=True)
        try:
            return schema.model_validate(data or {})
        except ValidationError as error:
            raise BadRequest(describe_validation_error(error), context) from error

    def changes(self, payload: BaseModel) -> Dict[str, Any]:
        """Fields the caller actually supplied. An explicit None is only
        kept for nullable columns."""
        columns = self.model.__table__.c
        return {
            name: value
            for name, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or columns[name].nullable
        }

    # Uniqueness ----------------------------------------------------------

    def candidates(self, values: Mapping[str, Any], current: Any = None) -> List[Tuple[UniqueKey, Dict[str, Any]]]:
        """Unique keys to check for these values. On update only keys with a
        changed column are checked, filling unchanged columns from the
        current row."""
        result = []
        for key in self.unique_keys:
            if current is None:
                result.append((key, {column: values.get(column) for column in key}))
                continue
            changed = any(
                column in values and values[column] != getattr(current, column)
                for column in key
            )
            if changed:
                result.append((key, {column: values.get(column, getattr(current, column)) for column in key}))
        return result

    def check_unique(
        self,
        scope_id: Optional[int],
        exclude_id: Optional[int],
        candidates: Sequence[Tuple[UniqueKey, Dict[str, Any]]],
        context: str
    ) -> None:
        for key, candidate in candidates:
            if not self.unique.is_unique(self.model, candidate, scope_id=scope_id, exclude_id=exclude_id):
                raise NotUnique(self.not_unique_message(key, candidate), context)

    # Shared operations ---------------------------------------------------

    def _all(self, scope_id: Optional[int], options: Options) -> List[Any]:
        options = self.options(self.all_options, options, self.context('all'))
        return list(self.session.execute(self.queries.select_all(scope_id, options)).scalars().all())

    def _find(self, scope_id: Optional[int], row_id: int, options: Options = None) -> Any:
        options = self.options(self.find_options, options, self.context('find'))
        row = self.session.execute(self.queries.select_one(scope_id, row_id, options)).scalar_one_or_none()
        if row is None:
            raise NotFound(f"id: Missing {self.kind} {row_id}", self.context('find'))
        return row

    def _exact(self, scope_id: Optional[int], key: Mapping[str, Any], label: str, options: Options = None) -> Any:
        field = next(iter(key)) if len(key) == 1 else "name"
        options = self.options(self.find_options, options, self.context('exact'))
        row = self.session.execute(self.queries.select_exact(scope_id, key, options)).scalar_one_or_none()
        if row is None:
            raise NotFound(f"{field}: Missing {self.kind} '{label}'", self.context('exact'))
        return row

    def _insert(self, scope_id: Optional[int], data: Payload) -> Any:
        context = self.context('insert')
        values = self.payload(self.create_schema, data, context).model_dump()
        self.validate(values, context)
        candidates = self.candidates(values)
        unique_scope = scope_id if self.scoped else None
        self.check_unique(unique_scope, None, candidates, context)

        row = self.model(**self.prepare(values))
        if self.scoped:
            row.library_id = scope_id  # Ownership comes from the scope, never the payload
        self.session.add(row)
        self._commit(context, unique_scope, None, candidates)
        logger.info(f"{context}: inserted {self.kind} {row.id}")
        return row

    def _update(self, scope_id: Optional[int], row_id: int, data: Payload) -> Any:
        context = self.context('update')
        row = self._find(scope_id, row_id)
        values = self.changes(self.payload(self.update_schema, data, context))
        self.validate(values, context)
        candidates = self.candidates(values, current=row)
        unique_scope = scope_id if self.scoped else None
        self.check_unique(unique_scope, row_id, candidates, context)

        for column, value in self.prepare(values).items():
            setattr(row, column, value)
        if self.scoped:
            row.library_id = scope_id  # No reassigning ownership
        self._commit(context, unique_scope, row_id, candidates)
        if values:
            logger.info(f"{context}: updated {self.kind} {row_id} ({', '.join(sorted(values))})")
        return row

    def _remove(self, scope_id: Optional[int], row_id: int) -> Any:
        context = self.context('remove')
        row = self._find(scope_id, row_id)
        self.session.delete(row)
        self.session.commit()
        logger.info(f"{context}: removed {self.kind} {row_id}")
        return row

    def _commit(
        self,
        context: str,
        scope_id: Optional[int],
        exclude_id: Optional[int],
        candidates: Sequence[Tuple[UniqueKey, Dict[str, Any]]]
    ) -> None:
        try:
            self.session.commit()
        except IntegrityError as error:
            self.session.rollback()
            # A concurrent writer got past the pre-check; report it the same way
            for key, candidate in candidates:
                if not self.unique.is_unique(self.model, candidate, scope_id=scope_id, exclude_id=exclude_id):
                    raise NotUnique(self.not_unique_message(key, candidate), context) from error
            raise


class ScopedActions(BaseActions):
    """Public operations for entities owned by a Library."""

    @catalog_action
    def all(self, library_id: int, options: Options = None) -> List[Any]:
        """Return every row in the Library matching the options (possibly none)."""
        return self._all(library_id, options)

    @catalog_action
    def find(self, library_id: int, row_id: int, options: Options = None) -> Any:
        """Return the row with this ID in the Library, or raise NotFound."""
        return self._find(library_id, row_id, options)

    @catalog_action
    def exact(self, library_id: int, name: str, options: Options = None) -> Any:
        """Return the row with exactly this name in the Library, or raise NotFound."""
        return self._exact(library_id, {'name': name}, name, options)

    @catalog_action
    def insert(self, library_id: int, data: Payload) -> Any:
        """Create a row in the Library.

        Raises:
            NotFound: If the Library does not exist
            BadRequest: If validation fails
            NotUnique: If the name is already in use in the Library
        """
        self.related('Library').find(library_id)
        return self._insert(library_id, data)

    @catalog_action
    def update(self, library_id: int, row_id: int, data: Payload) -> Any:
        """Apply a partial update; fields not supplied are left alone."""
        return self._update(library_id, row_id, data)

    @catalog_action
    def remove(self, library_id: int, row_id: int) -> Any:
        """Delete the row and return its last known state."""
        return self._remove(library_id, row_id)

    def _connect(self, link, library_id: int, owner_id: int, related_id: int, name: str, **payload) -> Any:
        owner = self._find(library_id, owner_id)
        self.related(link.related_kind).find(library_id, related_id)
        self.links.connect(link, owner_id, related_id, self.context(name), **payload)
        return owner

    def _disconnect(self, link, library_id: int, owner_id: int, related_id: int, name: str) -> Any:
        owner = self._find(library_id, owner_id)
        self.related(link.related_kind).find(library_id, related_id)
        self.links.disconnect(link, owner_id, related_id, self.context(name))
        return owner
