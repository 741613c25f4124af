# users_api/errors.py


class UserStoreError(Exception):
    status_code = 500
    message = 'User store error.'

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(UserStoreError):
    status_code = 400
    message = 'Invalid user data.'


class ConflictError(UserStoreError):
    status_code = 409

    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f'User with ID {user_id} already exists.')


class NotFoundError(UserStoreError):
    status_code = 404

    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f'User with ID {user_id} not found.')
