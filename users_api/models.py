# users_api/models.py
from dataclasses import dataclass
from typing import Optional

from .errors import ValidationError

USER_FIELDS = ('Id', 'Name', 'Email')


def _field_value(value):
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise ValidationError()
    if isinstance(value, bool):
        return 'True' if value else 'False'
    if isinstance(value, float):
        # 與 .NET 的 double 字串一致：1.0 -> '1'，1e20 -> '1E+20'
        text = repr(value).upper()
        return text[:-2] if text.endswith('.0') else text
    return str(value)


@dataclass
class User:
    Id: Optional[str] = None
    Name: Optional[str] = None
    Email: Optional[str] = None

    @classmethod
    def from_dict(cls, data):
        """Build a User from a decoded JSON object.

        Keys are matched case-insensitively, unknown keys are dropped and
        scalar values are turned into strings.
        """
        if not isinstance(data, dict):
            raise ValidationError()
        lowered = {str(k).lower(): v for k, v in data.items()}
        return cls(**{f: _field_value(lowered.get(f.lower())) for f in USER_FIELDS})

    def to_dict(self):
        return {'Id': self.Id, 'Name': self.Name, 'Email': self.Email}


@dataclass
class GreetingRequest:
    name: Optional[str] = None

    @classmethod
    def from_json(cls, data):
        # 只接受字串；其他型別一律視為未提供
        if isinstance(data, dict) and isinstance(data.get('name'), str):
            return cls(name=data['name'])
        return cls()
