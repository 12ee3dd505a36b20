''' Handful tools '''
from datetime import datetime
import logging
import math
from typing import Any, Optional

from store_admin.exceptions import FilterError
from store_admin.models.base import BaseModel

MAX_PAGE_SIZE = 100

def modify_object(entity: BaseModel, payload: dict[str, Any],
                  editable_attributes: list[str]) -> BaseModel:
    '''Sets entity attributes present in payload. Unlike missing keys,
    keys with None value reset the attribute'''
    for attr in editable_attributes:
        if attr in payload and getattr(entity, attr) != payload[attr]:
            try:
                setattr(entity, attr, payload[attr])
            except Exception as ex:
                raise type(ex)(attr, ex)
            entity.when_changed = datetime.now()
    return entity

def get_bool(value: Optional[str]) -> Optional[bool]:
    '''Converts query string flag to boolean. Empty value means no flag'''
    if value is None or value == '':
        return None
    return value.lower() == 'true'

def _get_int(args, name, default):
    try:
        return int(args.get(name) or default)
    except ValueError:
        raise FilterError(f"{name}: Must be integer")

def paginate_query(query, args) -> tuple[list, dict[str, Any]]:
    '''
    Applies sorting and pagination from request arguments to a query

    :param query: model query to apply sorting and pagination to
    :param args: request arguments. Recognized are `page`, `limit`,
        `sort_by` and `sort_order`
    :returns: list of entities of the requested page and pagination metadata
    :raises FilterError: in case of invalid arguments
    '''
    logger = logging.getLogger('paginate_query()')
    model = query.column_descriptions[0]['entity']
    page = max(1, _get_int(args, 'page', 1))
    limit = min(MAX_PAGE_SIZE, max(1, _get_int(args, 'limit', 20)))

    sort_by = args.get('sort_by') or 'when_changed'
    if sort_by not in model.__table__.columns.keys():
        raise FilterError(f"sort_by: Can't sort by {sort_by}")
    sort_order = (args.get('sort_order') or 'desc').lower()
    if sort_order not in ('asc', 'desc'):
        raise FilterError("sort_order: Must be 'asc' or 'desc'")
    column = getattr(model, sort_by)
    query = query.order_by(
        column.asc() if sort_order == 'asc' else column.desc(),
        model.id.asc() if sort_order == 'asc' else model.id.desc())

    total = query.count()
    total_pages = math.ceil(total / limit)
    logger.debug("Returning page %s of %s (%s entities)", page, total_pages, total)
    entities = query.offset((page - 1) * limit).limit(limit).all()
    return entities, {
        'page': page,
        'limit': limit,
        'total': total,
        'total_pages': total_pages,
        'has_next_page': page < total_pages,
        'has_prev_page': page > 1
    }
