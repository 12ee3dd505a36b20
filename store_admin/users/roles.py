'''
Role assignments.

Roles are granted to users according to the ``ROLE_ASSIGNMENTS`` setting,
which maps a user email to a list of role names::

    "ROLE_ASSIGNMENTS": {
        "admin@example.com": ["admin"]
    }

The assignments are written to the roles table when the application starts,
so request handlers see them through the regular user datastore.
'''
from __future__ import annotations
import logging

from store_admin import db, security

def sync_role_assignments(assignments: dict[str, list[str]]) -> int:
    '''
    Creates configured roles and grants them to the configured users

    :param assignments: user email to role names mapping
    :returns: number of newly granted roles
    '''
    logger = logging.getLogger('sync_role_assignments()')
    datastore = security.datastore
    granted = 0
    for email, role_names in assignments.items():
        if isinstance(role_names, str):
            role_names = [role_names]
        roles = [datastore.find_or_create_role(name) for name in role_names]
        user = datastore.find_user(email=email)
        if user is None:
            logger.warning("User %s isn't found. Can't grant roles %s",
                           email, role_names)
            continue
        for role in roles:
            if datastore.add_role_to_user(user, role):
                logger.info("Role %s is granted to %s", role.name, email)
                granted += 1
    db.session.commit()
    return granted
