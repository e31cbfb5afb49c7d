from django.db import transaction
from django.db.models import Max

from .models import SequenceCounter


def current_max(model) -> int:
    return model.objects.aggregate(top=Max("seq"))["top"] or 0


def allocate(model) -> int:
    """Return the next sequential id for ``model``.

    The per-kind counter row is locked for the rest of the enclosing
    transaction, so callers that allocate and insert inside one
    ``transaction.atomic()`` block never hand out the same id twice.
    Records inserted without the counter (seeding) are picked up through
    the current maximum.
    """
    with transaction.atomic():
        counter, _ = SequenceCounter.objects.select_for_update().get_or_create(
            kind=model._meta.label_lower
        )
        counter.value = max(counter.value, current_max(model)) + 1
        counter.save(update_fields=["value"])
    return counter.value
