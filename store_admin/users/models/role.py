'''
Role model
'''
from flask_security import RoleMixin
from sqlalchemy import Column, String

from store_admin import db
from store_admin.models.base import BaseModel

class Role(BaseModel, db.Model, RoleMixin): #type: ignore
    '''
    Represents site's role
    '''
    __tablename__ = 'roles'

    # Identification
    name = Column(String(32), unique=True, nullable=False)
    description = Column(String(256))

    def __repr__(self):
        return f'<Role {self.id}: {self.name}>'

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'users': [user.email for user in self.users]
        }
