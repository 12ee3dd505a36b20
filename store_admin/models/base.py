'''
Abscract base model
'''
from datetime import datetime

from sqlalchemy import Column, DateTime, Integer, func

from store_admin import db

class BaseModel:
    '''
    Base model
    '''
    id = Column(Integer, primary_key=True)
    when_created = Column(DateTime, index=True)
    when_changed = Column(DateTime)

    def __init__(self, **kwargs):
        self.when_created = datetime.now()
        # Set all mapped attributes passed
        for arg, value in kwargs.items():
            if hasattr(type(self), arg):
                setattr(self, arg, value)

    @classmethod
    def get_filter(cls, base_filter, column=None, filter_value=None):
        '''Abstract method for returning a filter for a model'''
        raise NotImplementedError(f'get_filter() is not implemented for {cls}')

    @classmethod
    def last_changed_first(cls):
        '''Ordering clauses putting the most recently updated entity first'''
        return (
            func.coalesce(cls.when_changed, cls.when_created).desc(),
            cls.id.desc()
        )

    def delete(self):
        '''Deletes an entity itself'''
        db.session.delete(self)
