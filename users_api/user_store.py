# users_api/user_store.py
import json
import logging
import os

from .errors import ConflictError, NotFoundError, ValidationError
from .models import User

log = logging.getLogger(__name__)


class UserStore:
    """使用者資料：整份 JSON 檔即為資料庫。

    每次操作都重新讀檔，變更後整份寫回；不快取、不上鎖（後寫者勝）。
    """

    def __init__(self, path):
        self.path = path

    def ensure_file(self):
        if not os.path.exists(self.path):
            os.makedirs(os.path.dirname(self.path) or '.', exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump([], f)

    def read(self):
        self.ensure_file()
        with open(self.path, 'rb') as f:
            raw = f.read()
        try:
            data = json.loads(raw)
            if data is None:
                return []
            if not isinstance(data, list):
                raise ValueError('top-level value is not an array')
            # null 元素直接略過，其餘資料照常讀入
            return [User.from_dict(item) for item in data if item is not None]
        except (ValueError, ValidationError) as e:
            # 檔案壞掉時當成空集合，下一次寫入會覆蓋原內容
            log.warning('Unreadable user data in %s, treating as empty: %s', self.path, e)
            return []

    def write(self, users):
        self.ensure_file()
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump([u.to_dict() for u in users], f, ensure_ascii=False, indent=2)

    @staticmethod
    def _index_of(users, user_id):
        return next((i for i, u in enumerate(users) if u.Id == user_id), -1)

    def get_all(self):
        return self.read()

    def get_by_id(self, user_id):
        return next((u for u in self.read() if u.Id == user_id), None)

    def create(self, new_user):
        if new_user is None or not new_user.Id:
            raise ValidationError()
        users = self.read()
        if self._index_of(users, new_user.Id) != -1:
            raise ConflictError(new_user.Id)
        users.append(new_user)
        self.write(users)
        return new_user

    def update(self, user_id, updated_user):
        if updated_user is None:
            raise ValidationError()
        users = self.read()
        idx = self._index_of(users, user_id)
        if idx == -1:
            raise NotFoundError(user_id)
        # 整筆取代，包含 Id（不與路徑上的 id 比對）
        users[idx] = updated_user
        self.write(users)
        return updated_user

    def delete(self, user_id):
        users = self.read()
        idx = self._index_of(users, user_id)
        if idx == -1:
            raise NotFoundError(user_id)
        del users[idx]
        self.write(users)
