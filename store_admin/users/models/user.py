'''
User model
'''
from datetime import datetime
import uuid

from flask_security import UserMixin
from sqlalchemy import Boolean, Column, DateTime, Integer, String

from store_admin import db

roles_users = db.Table('roles_users',
        db.Column('user_id', db.Integer(), db.ForeignKey('users.id')),
        db.Column('role_id', db.Integer(), db.ForeignKey('roles.id')))

class User(db.Model, UserMixin): #type: ignore
    '''
    Represents site's user
    '''
    __tablename__ = 'users'

    # Identification
    id = Column(Integer, primary_key=True)
    email = Column(String(80), unique=True, nullable=False)
    username = Column(String(32), unique=True)
    password = Column(String(255))
    active = Column(Boolean, nullable=False, default=True)
    fs_uniquifier = Column(String(64), unique=True, nullable=False,
                           default=lambda: uuid.uuid4().hex)
    roles = db.relationship('Role', secondary=roles_users,
                            backref=db.backref('users', lazy='dynamic'))

    when_created = Column(DateTime, default=datetime.now)
    when_changed = Column(DateTime, onupdate=datetime.now)

    def __repr__(self):
        return f'<User {self.id}: {self.email}>'

    def to_dict(self):
        return {
            'id': self.id,
            'email': self.email,
            'username': self.username,
            'active': self.active,
            'roles': [role.name for role in self.roles],
            'when_created': self.when_created.strftime('%Y-%m-%d %H:%M:%S') \
                if self.when_created else None,
            'when_changed': self.when_changed.strftime('%Y-%m-%d %H:%M:%S') \
                if self.when_changed else None
        }
