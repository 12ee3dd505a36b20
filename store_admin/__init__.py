''' Initialization of the application '''
from json import load
import logging
import os
import types

from blinker import Namespace
from flask import Flask
from flask_caching import Cache
from flask_migrate import Migrate
from flask_security import Security
from flask_security.datastore import SQLAlchemyUserDatastore
from flask_sqlalchemy import SQLAlchemy

app: Flask
cache = Cache()
db = SQLAlchemy()
migrate = Migrate()
security = Security()
signals = Namespace()

def create_app(config=None):
    ''' Application factory '''
    global app
    config_file = config or os.environ.get('STORE_ADMIN_CONFIG_FILE') \
        or 'config-default.json'
    app = Flask(__name__)
    app.config.from_file(config_file, load=load)
    init_logging(app)

    cache.init_app(app)
    init_db(app, db)
    migrate.init_app(app, db, compare_type=True)

    from store_admin.users.models import Role, User
    security.init_app(app, SQLAlchemyUserDatastore(db, User, Role))

    register_components(app)
    init_roles(app)

    logging.info("The application is started")
    return app

def register_components(flask_app):
    import_models(flask_app)
    import store_admin.shipping
    import store_admin.users

    components_modules = [m[1] for m in globals().items()
                          if isinstance(m[1], types.ModuleType)
                             and m[1].__name__ not in ['store_admin.models']
                             and m[1].__name__.startswith('store_admin.')
                             and m[1].__file__
                             and m[1].__file__.endswith('__init__.py')
                         ]
    for component_module in components_modules:
        component_module.register_blueprints(flask_app)
    flask_app.logger.info('Blueprints are registered')

def import_models(flask_app):
    import store_admin.shipping.models
    import store_admin.users.models
    with flask_app.app_context():
        db.create_all()

def init_db(app: Flask, db: SQLAlchemy):
    logger = logging.getLogger('init_db()')
    db.init_app(app)

    def _dispose_db_pool():
        with app.app_context():
            logging.getLogger('_dispose_db_pool()').info("Disposing DB engine")
            db.engine.dispose() #type: ignore

    try:
        logger.info("Trying to postfork the DB connection")
        from uwsgidecorators import postfork #type: ignore
        postfork(_dispose_db_pool)
    except ImportError:
        logger.info("No UWSGI environment is detected")

def init_roles(flask_app):
    from store_admin.users.roles import sync_role_assignments
    with flask_app.app_context():
        sync_role_assignments(flask_app.config.get('ROLE_ASSIGNMENTS') or {})

def init_logging(flask_app):
    logger = logging.getLogger()
    logger.setLevel(flask_app.config['LOG_LEVEL'])
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s\t%(levelname)s\t%(name)s:%(funcName)s(%(filename)s:%(lineno)d): %(message)s"))
    logger.addHandler(handler)
    logger.info("Starting %s", flask_app.name)
    logger.info("Log level is %s", logging.getLevelName(logger.level))
    flask_app.logger.setLevel(flask_app.config['LOG_LEVEL'])
