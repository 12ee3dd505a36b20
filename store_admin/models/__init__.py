'''
Shared model primitives of the application
'''
from .base import BaseModel
