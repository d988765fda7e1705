"""
Persistence boundary for articles and media items.

Uniqueness is enforced by the database's unique indexes. Every write runs
in its own atomic block, so a concurrent writer that loses the race gets a
DuplicateKeyError instead of overwriting the winner.
"""
from django.db import IntegrityError, transaction

from .exceptions import DuplicateKeyError, NotFoundError, ValidationError
from .models import Article, MediaItem

READ_ONLY_FIELDS = ("id", "pk", "created_at", "updated_at")


class UniqueFieldStore:
    """
    Insert/update/delete for a model with unique columns.

    Subclasses set model and unique_fields; an IntegrityError raised by one
    of those columns is reported as DuplicateKeyError.
    """

    model = None
    unique_fields = ()

    def all(self):
        return self.model.objects.all()

    def filter(self, **lookups):
        return self.model.objects.filter(**lookups)

    def get(self, pk):
        try:
            return self.model.objects.get(pk=pk)
        except self.model.DoesNotExist:
            raise NotFoundError(f"{self.model.__name__} {pk} not found") from None

    def insert(self, fields):
        """
        Persist a new row.

        Raises:
            DuplicateKeyError: if a unique column already holds the value
        """
        try:
            with transaction.atomic():
                return self.model.objects.create(**fields)
        except IntegrityError as exc:
            self._raise_duplicate(exc, fields)
            raise

    def update(self, pk, patch):
        """
        Apply patch to an existing row and return it.

        updated_at is refreshed by the save.

        Raises:
            NotFoundError: if no row has this pk
            DuplicateKeyError: if patch collides with a different row
            ValidationError: if patch names a read-only or unknown field
        """
        self._check_patch(patch)
        try:
            with transaction.atomic():
                try:
                    obj = self.model.objects.select_for_update().get(pk=pk)
                except self.model.DoesNotExist:
                    raise NotFoundError(f"{self.model.__name__} {pk} not found") from None
                for name, value in patch.items():
                    setattr(obj, name, value)
                obj.save()
                return obj
        except IntegrityError as exc:
            self._raise_duplicate(exc, patch, exclude_pk=pk)
            raise

    def delete(self, pk):
        """Remove a row permanently."""
        deleted, _ = self.model.objects.filter(pk=pk).delete()
        if not deleted:
            raise NotFoundError(f"{self.model.__name__} {pk} not found")

    def _check_patch(self, patch):
        editable = {
            f.name for f in self.model._meta.concrete_fields
        } - set(READ_ONLY_FIELDS)
        # FK fields may be patched by object ("author") or id ("author_id")
        editable |= {
            f.attname for f in self.model._meta.concrete_fields if f.is_relation
        }
        invalid = sorted(set(patch) - editable)
        if invalid:
            raise ValidationError(f"Cannot update field(s): {', '.join(invalid)}")

    def _raise_duplicate(self, exc, fields, exclude_pk=None):
        for name in self.unique_fields:
            if name not in fields:
                continue
            clash = self.model.objects.filter(**{name: fields[name]})
            if exclude_pk is not None:
                clash = clash.exclude(pk=exclude_pk)
            if clash.exists():
                raise DuplicateKeyError(name, fields[name]) from exc


class ArticleStore(UniqueFieldStore):
    model = Article
    unique_fields = ("slug",)

    def published(self):
        return self.filter(status=Article.STATUS_PUBLISHED)


class MediaStore(UniqueFieldStore):
    model = MediaItem
    unique_fields = ("file_name", "url")
