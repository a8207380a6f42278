from typing import Any, Mapping, Optional, Sequence, Type
from django.db.models import Model, QuerySet


class DB_Accessor:
    """Generic data accessor to wrap basic queryset operations.

    Reads take explicit `select_related` / `prefetch_related` projections so
    every caller states which associations come back pre-joined.
    """

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def query(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        select_related: Sequence[str] = (),
        prefetch_related: Sequence[Any] = (),
        order_by: Sequence[str] = (),
    ) -> QuerySet:
        """Return a filtered queryset with the requested joins applied."""
        qs: QuerySet = self.model.objects.filter(**(filters or {}))
        if select_related:
            qs = qs.select_related(*select_related)
        if prefetch_related:
            qs = qs.prefetch_related(*prefetch_related)
        return qs.order_by(*order_by) if order_by else qs

    def first(self, **lookup: Any) -> Optional[Model]:
        """Return the first object matching lookup, or None."""
        return self.model.objects.filter(**lookup).first()

    def exists(self, **lookup: Any) -> bool:
        """Return True when any object matches lookup."""
        return self.model.objects.filter(**lookup).exists()

    def create(self, **data: Any) -> Model:
        """Create and return a new object."""
        return self.model.objects.create(**data)

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
