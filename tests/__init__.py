from datetime import datetime, timedelta
from unittest import TestCase

from flask import g
from flask_login import FlaskLoginClient
from sqlalchemy import text

from store_admin import cache, db, create_app

app = create_app("../tests/config-test.json")
app.test_client_class = FlaskLoginClient
app.app_context().push()

class BaseTestCase(TestCase):
    user = None
    admin = None

    @classmethod
    def setUpClass(cls):
        db.session.execute(text('pragma foreign_keys=on'))

    def setUp(self):
        self.app = app
        g.pop('_login_user', None)
        db.create_all()
        cache.clear()
        self.client = self.app.test_client()
        self._ctx = self.app.test_request_context()
        self._ctx.push()
        self.maxDiff = None

    def tearDown(self):
        db.session.rollback()
        g.pop('_login_user', None)
        self._ctx.pop()
        db.session.remove()
        db.drop_all()

    def create_users(self, suffix):
        '''Creates a plain user and an admin for the test case'''
        from store_admin.users.models import Role, User
        admin_role = Role(name='admin')
        self.user = User(email=f'user_{suffix}@name.com', active=True)
        self.admin = User(email=f'root_{suffix}@name.com', active=True,
                          roles=[admin_role])
        self.try_add_entities([admin_role, self.user, self.admin])

    def open_as(self, user, operation):
        '''
        Runs operation with a test client logged in as user (anonymous if None)
        @param user: User - user to log in as
        @param operation: function - a function, accepting test client, to execute
        '''
        # The app context is shared by all requests, so is the user cached in it
        g.pop('_login_user', None)
        client = self.app.test_client(user=user) \
            if user is not None else self.app.test_client()
        return operation(client)

    def try_admin_operation(self, operation, admin_only=False):
        '''
        Attempt an admin operation
        @param operation: function - a function, accepting test client, to execute
        @param admin_only: bool - if `true` - do not try to perform operation as a user
        '''
        res = self.open_as(None, operation)
        self.assertIn(res.status_code, (302, 401, 403))
        if not admin_only:
            res = self.open_as(self.user, operation)
            self.assertIn(res.status_code, (302, 401, 403))
        return self.open_as(self.admin, operation)

    def as_admin(self, operation):
        return self.open_as(self.admin, operation)

    def try_add_entity(self, entity):
        try:
            db.session.add(entity)
            db.session.commit()
        except Exception as e:
            print(f'Exception while trying to add <{entity}>:', e)
            db.session.rollback()

    def try_add_entities(self, entities):
        for entity in entities:
            self.try_add_entity(entity)

    @staticmethod
    def changed(minutes_ago):
        '''Timestamp to make one rule more recently updated than another'''
        return datetime.now() - timedelta(minutes=minutes_ago)
