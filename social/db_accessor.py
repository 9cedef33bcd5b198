import math
from typing import Any, Dict, List, Optional, Tuple, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def page(self, qs: QuerySet, *, page: int = 1, limit: int = 20) -> Tuple[List[Model], Dict[str, int]]:
        """Slice one page out of qs; return (items, pagination summary)."""
        page = max(1, int(page))
        limit = max(1, int(limit))
        total = qs.count()
        start = (page - 1) * limit
        items = list(qs[start:start + limit])
        return items, {"total": total, "page": page, "pages": math.ceil(total / limit)}

    def find(self, **lookup: Any) -> Optional[Model]:
        """Fetch a single object matching the lookup, or None."""
        return self.model.objects.filter(**lookup).first()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
