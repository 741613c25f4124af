from flask import Response, current_app, jsonify, request

from . import users_bp
from .errors import NotFoundError, UserStoreError
from .models import User


def get_store():
    return current_app.extensions['user_store']


def text_response(message, status=200):
    return Response(message, status=status, mimetype='text/plain')


def _user_from_body():
    # 空 body、null 或解析失敗都視為「沒有資料」
    data = request.get_json(force=True, silent=True)
    if data is None:
        return None
    return User.from_dict(data)


@users_bp.errorhandler(UserStoreError)
def handle_store_error(e):
    current_app.logger.warning('%s %s -> %s: %s', request.method, request.path, e.status_code, e.message)
    return text_response(e.message, e.status_code)


@users_bp.route('', methods=['POST'])
def create_user():
    current_app.logger.info('Processing POST request to create a user.')
    current_app.logger.debug('Request Body: %s', request.get_data(as_text=True))

    user = get_store().create(_user_from_body())

    current_app.logger.info('User with ID %s created successfully.', user.Id)
    resp = jsonify(user.to_dict())
    resp.status_code = 201
    resp.headers['Location'] = f'/users/{user.Id}'
    return resp


@users_bp.route('', methods=['GET'])
def get_all_users():
    current_app.logger.info('Processing GET request for all users.')
    return jsonify([u.to_dict() for u in get_store().get_all()])


@users_bp.route('/<user_id>', methods=['GET'])
def get_user(user_id):
    current_app.logger.info('Processing GET request.')
    user = get_store().get_by_id(user_id)
    if user is None:
        raise NotFoundError(user_id)
    return jsonify(user.to_dict())


@users_bp.route('/<user_id>', methods=['PUT'])
def update_user(user_id):
    current_app.logger.info('Processing PUT request.')
    user = get_store().update(user_id, _user_from_body())
    return jsonify(user.to_dict())


@users_bp.route('/<user_id>', methods=['DELETE'])
def delete_user(user_id):
    current_app.logger.info('Processing DELETE request.')
    get_store().delete(user_id)
    return text_response(f'User with ID {user_id} deleted.')
