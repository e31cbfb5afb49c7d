"""List and create operations shared by every content kind."""

import logging
from collections.abc import Mapping

from django.db import DatabaseError, transaction

from . import sequences, uploads
from .choices import ALL_CATEGORIES
from .exceptions import (
    InvalidCategory,
    InvalidEnum,
    InvalidField,
    MalformedSkillList,
    MissingField,
    StoreFailure,
)
from .fields import MALFORMED_SKILL
from .kinds import ResourceKind

logger = logging.getLogger(__name__)

_MISSING_CODES = {"required", "blank", "null", "empty"}


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return not value
    return False


def _field_value(data, name):
    # QueryDict.get() returns only the last value of a repeated key
    if hasattr(data, "getlist"):
        values = data.getlist(name)
        if len(values) > 1:
            return values
    return data.get(name)


def missing_fields(kind: ResourceKind, data, image=None) -> list:
    missing = []
    for name in kind.required:
        value = image if name == kind.upload_field else _field_value(data, name)
        if _is_blank(value):
            missing.append(name)
    return missing


def _error_codes(errors):
    if isinstance(errors, Mapping):
        for value in errors.values():
            yield from _error_codes(value)
    elif isinstance(errors, list):
        for value in errors:
            yield from _error_codes(value)
    else:
        yield getattr(errors, "code", None), str(errors)


def _raise_for_errors(kind: ResourceKind, errors) -> None:
    found = list(_error_codes(errors))
    codes = {code for code, _ in found}
    if codes & _MISSING_CODES:
        raise MissingField(f"All required fields ({', '.join(kind.required)}) must be provided.")
    if "invalid_choice" in codes:
        raise InvalidEnum(kind.enum_error)
    for code, message in found:
        if code == MALFORMED_SKILL:
            raise MalformedSkillList(message)
    raise InvalidField(found[0][1] if found else None)


def _discard_quietly(reference: str) -> None:
    try:
        uploads.discard_image(reference)
    except Exception:  # noqa: BLE001
        logger.exception("Could not remove orphaned upload %s", reference)


def list_records(kind: ResourceKind, category=None) -> list:
    """Records of ``kind`` in sequence order, optionally narrowed to a category."""
    queryset = kind.model.objects.all()
    if category and kind.filterset_class is not None:
        if category.lower() != ALL_CATEGORIES:
            filterset = kind.filterset_class(data={"category": category}, queryset=queryset)
            if not filterset.is_valid():
                raise InvalidCategory()
            queryset = filterset.qs
    try:
        return kind.serializer_class(queryset, many=True).data
    except DatabaseError as exc:
        logger.exception("Error fetching %s", kind.plural)
        raise StoreFailure(f"Error fetching {kind.plural}") from exc


def create_record(kind: ResourceKind, data, image=None):
    """Validate ``data`` for ``kind`` and persist one new record.

    Nothing is written unless every check passes. ``image`` is the uploaded
    file for kinds that carry one and must already have passed
    :func:`content.uploads.validate_image`.
    """
    missing = missing_fields(kind, data, image)
    if missing:
        raise MissingField(f"All required fields ({', '.join(kind.required)}) must be provided.")

    serializer = kind.serializer_class(data=data)
    if not serializer.is_valid():
        _raise_for_errors(kind, serializer.errors)

    extra = {}
    if kind.upload_field:
        try:
            extra[kind.upload_field] = uploads.store_image(image)
        except Exception as exc:  # noqa: BLE001
            # local OSError or any error raised by the Supabase client
            logger.exception("Error storing %s image", kind.label)
            raise StoreFailure(f"Error saving {kind.label}: {exc}") from exc

    try:
        with transaction.atomic():
            record = serializer.save(seq=sequences.allocate(kind.model), **extra)
    except DatabaseError as exc:
        logger.exception("Error saving %s", kind.label)
        if kind.upload_field:
            _discard_quietly(extra[kind.upload_field])
        raise StoreFailure(f"Error saving {kind.label}: {exc}") from exc

    logger.info("Created %s #%s %r", kind.label, record.seq, getattr(record, kind.title_field))
    return record
