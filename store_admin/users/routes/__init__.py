from . import role_api
