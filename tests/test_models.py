import pytest

from users_api.errors import ValidationError
from users_api.models import GreetingRequest, User


def test_user_from_dict_is_case_insensitive():
    user = User.from_dict({'id': 1, 'NAME': 'Ann', 'email': 'a@x.com', 'extra': 'x'})
    assert user == User('1', 'Ann', 'a@x.com')


def test_user_from_dict_missing_fields():
    assert User.from_dict({}) == User()


@pytest.mark.parametrize('data', [[], 'Ann', {'Id': ['1']}, {'Name': {'first': 'Ann'}}])
def test_user_from_dict_rejects_bad_shapes(data):
    with pytest.raises(ValidationError):
        User.from_dict(data)


@pytest.mark.parametrize('data, expected', [
    ({'name': 'Ann'}, 'Ann'),
    ({'name': 3}, None),
    ({}, None),
    (['Ann'], None),
    (None, None),
])
def test_greeting_request(data, expected):
    assert GreetingRequest.from_json(data).name == expected


@pytest.mark.parametrize('value, expected', [(1e20, '1E+20'), (2.0, '2'), (1.5, '1.5')])
def test_user_from_dict_float_values(value, expected):
    assert User.from_dict({'Id': value}).Id == expected
