# users_api/__init__.py
from flask import Blueprint

users_bp = Blueprint('users', __name__, url_prefix='/api/users')

from . import routes  # 讓 routes.py 把路由掛到 users_bp 上
