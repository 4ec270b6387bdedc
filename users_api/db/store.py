# db/store.py
import logging
import threading
from typing import Dict, List, Optional

from ..api.schemas import User

SEED_USERS = [
    {"id": 1, "name": "Pandukumar", "city": "Wgl", "position": "angular developer"},
    {"id": 2, "name": "Madhu kumar", "city": "Hyd", "position": "react developer"},
]

ID_STRATEGIES = ("count", "sequence")


class UserStore:
    """
    Коллекция пользователей в памяти процесса.

    Порядок вставки сохраняется. Все операции выполняются под одной
    блокировкой: FastAPI вызывает синхронные обработчики из пула потоков.
    Наружу отдаются только копии записей.

    id_assignment:
      "count"    - id = len(users) + 1; после удаления id может повториться
      "sequence" - id = наибольший когда-либо выданный id + 1
    """

    def __init__(self, users: Optional[List[dict]] = None, id_assignment: str = "count"):
        if id_assignment not in ID_STRATEGIES:
            raise ValueError(f"Unknown id assignment strategy: {id_assignment}")
        self.id_assignment = id_assignment
        self._lock = threading.Lock()
        self._users: List[User] = [User(**data) for data in users or []]
        self._last_id = max((user.id for user in self._users), default=0)

    @classmethod
    def seeded(cls, id_assignment: str = "count") -> "UserStore":
        return cls(SEED_USERS, id_assignment=id_assignment)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def _next_id(self) -> int:
        if self.id_assignment == "sequence":
            return self._last_id + 1
        return len(self._users) + 1

    def _find_index(self, user_id: int) -> Optional[int]:
        # Линейный поиск
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None

    def list_users(self) -> List[User]:
        with self._lock:
            return [user.model_copy() for user in self._users]

    def create_user(self, name: str, city: Optional[str] = None, position: Optional[str] = None) -> User:
        with self._lock:
            user = User(id=self._next_id(), name=name, city=city, position=position)
            self._users.append(user)
            self._last_id = max(self._last_id, user.id)
        logging.info(f"User created: id={user.id}")
        return user.model_copy()

    def update_user(self, user_id: int, changes: Dict[str, str]) -> Optional[User]:
        """Применяет изменения к записи; None, если записи нет."""
        with self._lock:
            index = self._find_index(user_id)
            if index is None:
                return None
            user = self._users[index]
            for field, value in changes.items():
                setattr(user, field, value)
            updated = user.model_copy()
        logging.info(f"User updated: id={user_id}, fields={sorted(changes)}")
        return updated

    def delete_user(self, user_id: int) -> bool:
        with self._lock:
            index = self._find_index(user_id)
            if index is None:
                return False
            del self._users[index]
        logging.info(f"User deleted: id={user_id}")
        return True
