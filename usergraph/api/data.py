# usergraph/api/data.py
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from usergraph.api.utils.logger import log_lookup


@dataclass(frozen=True)
class User:
    id: str
    first_name: str
    age: int


# Fixed dataset, created once at import and never modified.
USERS: Tuple[User, ...] = (
    User(id="12", first_name="Asif", age=32),
    User(id="13", first_name="Saif", age=32),
)


def find_user(user_id: Optional[str], users: Iterable[User] = USERS) -> Optional[User]:
    """
    Return the first user whose id equals `user_id`, or None.

    Ids are compared as-is, so None (argument omitted) and non-string
    values never match.
    """
    user = next((u for u in users if u.id == user_id), None)
    log_lookup(user_id, user is not None)
    return user
