"""Base abstract models shared by the catalogue modules.

Provides:
- ``current_millis``: wall-clock time as integer milliseconds since epoch.
- ``BaseModel``: auto-increment primary key + ``created_at`` / ``updated_at``
  stored as epoch milliseconds.
- ``SoftDeleteModel``: Extends BaseModel with soft-delete via an ``active``
  boolean flag.

Design decisions:
- Timestamps are plain ``BigIntegerField`` columns, not ``auto_now`` fields.
  The service layer stamps them explicitly so every write path is visible.
- ``objects`` manager returns ALL records (unfiltered).  Use ``.active()``
  explicitly to exclude soft-deleted rows.
- ``delete()`` keeps Django semantics (physical removal).  Soft delete is
  ``deactivate()`` followed by a save.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone


def current_millis() -> int:
    """Return the current time as milliseconds since the Unix epoch."""
    return int(timezone.now().timestamp() * 1000)


# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with integer PK and epoch-millisecond timestamps."""

    id = models.BigAutoField(primary_key=True)
    created_at = models.BigIntegerField(default=current_millis, editable=False)
    updated_at = models.BigIntegerField(default=current_millis)

    class Meta:
        abstract = True

    def stamp_created(self) -> None:
        """Set both timestamps to the same instant (first persistence)."""
        now = current_millis()
        self.created_at = now
        self.updated_at = now

    def touch(self) -> None:
        """Refresh ``updated_at``; never moves it backwards."""
        self.updated_at = max(current_millis(), self.updated_at or 0)


# ---------------------------------------------------------------------------
# Soft Delete infrastructure
# ---------------------------------------------------------------------------


class SoftDeleteQuerySet(models.QuerySet):
    """QuerySet with soft-delete helpers."""

    def active(self) -> SoftDeleteQuerySet:
        """Return only records with ``active=True``."""
        return self.filter(active=True)


class SoftDeleteManager(models.Manager):
    """Manager that exposes ``.active()`` on the queryset."""

    def get_queryset(self) -> SoftDeleteQuerySet:
        return SoftDeleteQuerySet(self.model, using=self._db)

    def active(self) -> SoftDeleteQuerySet:
        return self.get_queryset().active()


class SoftDeleteModel(BaseModel):
    """Abstract model with soft-delete via a two-valued ``active`` flag.

    - ``objects`` is **unfiltered** (returns all rows).
    - Use ``Model.objects.active()`` to exclude soft-deleted rows.
    - ``deactivate()`` flips the flag in memory; the caller persists it.
    """

    active = models.BooleanField(default=True, db_index=True)

    objects = SoftDeleteManager()

    class Meta:
        abstract = True

    def deactivate(self) -> None:
        """Mark this instance inactive and refresh ``updated_at``."""
        self.active = False
        self.touch()
