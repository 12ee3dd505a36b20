from flask import Blueprint

bp_api_user = Blueprint('shipping_api_user', __name__, url_prefix='/api/v1/shipping')
bp_api_admin = Blueprint('shipping_api_admin', __name__, url_prefix='/api/v1/admin/shipping')

def register_blueprints(flask_app):
    from . import routes
    flask_app.register_blueprint(bp_api_admin)
    flask_app.register_blueprint(bp_api_user)
    _register_signals()

def _register_signals():
    from .signals import shipping_rate_deleted, shipping_rate_saved
    from .signal_handlers import on_shipping_rate_changed
    shipping_rate_saved.connect(on_shipping_rate_changed)
    shipping_rate_deleted.connect(on_shipping_rate_changed)
