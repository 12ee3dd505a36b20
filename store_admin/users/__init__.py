from flask import Blueprint

bp_api_admin = Blueprint('users_api_admin', __name__, url_prefix='/api/v1/admin/user')

def register_blueprints(flask_app):
    from . import routes
    flask_app.register_blueprint(bp_api_admin)
