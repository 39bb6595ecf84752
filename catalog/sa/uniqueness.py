# catalog/sa/uniqueness.py
from typing import Any, Mapping, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

class UniquenessValidator:
    """Decides whether a proposed unique value is still available.

    The check is advisory: it gives callers a precise error message, while
    the unique constraints in the schema remain the final word when two
    writers race.
    """

    def __init__(self, session: Session):
        self.session = session

    def is_unique(
        self,
        model: Any,
        candidate: Mapping[str, Any],
        scope_id: Optional[int] = None,
        exclude_id: Optional[int] = None
    ) -> bool:
        """Return True if no other row already holds the candidate value.

        Args:
            model: Mapped class to check (e.g. Author)
            candidate: Column name -> proposed value, compared case-sensitively
            scope_id: Owning Library ID for Library scoped uniqueness, else None
            exclude_id: ID of the row being updated; matching itself is not a conflict

        Returns:
            True if the value is available
        """
        statement = select(model.id).where(
            *[getattr(model, column) == value for column, value in candidate.items()]
        )
        if scope_id is not None:
            statement = statement.where(model.library_id == scope_id)
        existing_id = self.session.execute(statement.limit(1)).scalar_one_or_none()
        if existing_id is None:
            return True
        return existing_id == exclude_id
