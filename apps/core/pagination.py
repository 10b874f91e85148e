from typing import Type

from django.core.paginator import Paginator
from django.db.models import QuerySet
from ninja import Schema


def paginate(queryset: QuerySet, page: int, page_size: int, schema: Type[Schema]) -> dict:
    """
    Slice a queryset into one page and serialize its items with `schema`.

    Out-of-range or invalid page numbers resolve to the nearest valid page,
    following Paginator.get_page().
    """
    paginator = Paginator(queryset, max(1, page_size))
    page_obj = paginator.get_page(page)

    return {
        "items": [schema.from_orm(obj) for obj in page_obj.object_list],
        "page": page_obj.number,
        "page_size": paginator.per_page,
        "total": paginator.count,
        "num_pages": paginator.num_pages,
    }
