from flask import Flask, request
import logging
import os

from users_api import users_bp
from users_api.models import GreetingRequest
from users_api.routes import text_response
from users_api.user_store import UserStore

DEFAULT_USERS_FILE = os.path.join('Data', 'users.json')

GREETING_GENERIC = ('This HTTP triggered function executed successfully. '
                    'Pass a name in the query string or in the request body for a personalized response.')


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(
        USERS_FILE=os.environ.get('USERS_FILE', DEFAULT_USERS_FILE),
        LOG_LEVEL=os.environ.get('LOG_LEVEL', 'INFO'),
    )
    if test_config is not None:
        app.config.update(test_config)

    # 保留 Id / Name / Email 的欄位順序
    app.json.sort_keys = False
    level = str(app.config['LOG_LEVEL']).upper()
    app.logger.setLevel(level)
    logging.getLogger('users_api').setLevel(level)

    # 資料檔路徑由設定注入，路由透過 current_app 取得
    app.extensions['user_store'] = UserStore(app.config['USERS_FILE'])
    app.register_blueprint(users_bp)

    @app.route('/api/Run', methods=['GET', 'POST'])
    def run():
        app.logger.info('HTTP trigger function processed a request.')

        # query string 優先（即使是空字串）
        name = request.args.get('name')
        if name is None:
            name = GreetingRequest.from_json(request.get_json(force=True, silent=True)).name

        if not name:
            return text_response(GREETING_GENERIC)
        return text_response(f'Hello, {name}. This HTTP triggered function executed successfully.')

    return app


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    create_app().run(debug=True)
