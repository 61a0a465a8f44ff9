"""
Pydantic serialization utilities for paginated items.

Pages loaded from SQLAlchemy hold ORM objects; JSON responses need plain
dicts produced through a schema with from_attributes enabled.
"""

from typing import Any, List, Optional, Type

from pydantic import BaseModel


def serialize_orm(model_class: Type[BaseModel], orm_obj) -> dict:
    """
    Serialize a single ORM object to dict via Pydantic schema.

    Example:
        >>> serialize_orm(ArticleResponse, article)
        {'id': 1, 'title': 'First'}
    """
    return model_class.model_validate(orm_obj).model_dump()


def serialize_orm_list(model_class: Type[BaseModel], orm_objs: List) -> List[dict]:
    """Serialize a list of ORM objects to list of dicts via Pydantic schema."""
    return [serialize_orm(model_class, obj) for obj in orm_objs]


def serialize_items(
    items: Optional[List[Any]], model_class: Optional[Type[BaseModel]] = None
) -> List[Any]:
    """Items of a page, passed through model_class when one is given."""
    if not items:
        return []
    if model_class is None:
        return list(items)
    return serialize_orm_list(model_class, items)
