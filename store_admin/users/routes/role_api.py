from flask import jsonify, request
from flask_security import roles_required

from store_admin.users import bp_api_admin
from store_admin.users.models.role import Role

@bp_api_admin.route('/role')
@roles_required('admin')
def get_roles():
    '''Returns list of roles with users they are granted to'''
    roles = Role.query
    if request.values.get('q') is not None:
        roles = roles.filter(Role.name.like(f'%{request.values["q"]}%'))
    return jsonify([role.to_dict() for role in roles.order_by(Role.name)])
