# catalog/sa/actions/user.py
"""Actions for Users.

Passwords are stored as bcrypt hashes and never handed back: every User
returned from here is detached from the session with its password blanked.
"""
from typing import Any, Dict, List

from catalog.passwords import hash_password
from catalog.sa.actions.base import BaseActions, Options, Payload, catalog_action
from catalog.sa.models import User
from catalog.sa.queries import UserQueries
from catalog.schemas import UserAllOptions, UserCreate, UserFindOptions, UserUpdate


class UserActions(BaseActions):
    kind = 'User'
    model = User
    queries = UserQueries()
    all_options = UserAllOptions
    find_options = UserFindOptions
    create_schema = UserCreate
    update_schema = UserUpdate
    unique_keys = (('username',),)
    scoped = False

    def prepare(self, values: Dict[str, Any]) -> Dict[str, Any]:
        values = dict(values)
        if 'password' in values:
            if values['password']:
                values['password'] = hash_password(values['password'])
            else:
                del values['password']
        return values

    def redact(self, user: User) -> User:
        # Detach first so the blank password can never be flushed
        if user in self.session:
            self.session.expunge(user)
        user.password = ""
        return user

    @catalog_action
    def all(self, options: Options = None) -> List[User]:
        return [self.redact(user) for user in self._all(None, options)]

    @catalog_action
    def find(self, user_id: int, options: Options = None) -> User:
        return self.redact(self._find(None, user_id, options))

    @catalog_action
    def exact(self, username: str, options: Options = None) -> User:
        return self.redact(self._exact(None, {'username': username}, username, options))

    @catalog_action
    def insert(self, data: Payload) -> User:
        user = self._insert(None, data)
        return self.find(user.id)

    @catalog_action
    def update(self, user_id: int, data: Payload) -> User:
        """Apply a partial update. A blank password keeps the stored one."""
        self._update(None, user_id, data)
        return self.find(user_id)

    @catalog_action
    def remove(self, user_id: int) -> User:
        return self.redact(self._remove(None, user_id))
