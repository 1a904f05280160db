"""Model classes and adapters shared by the unit tests."""

from __future__ import annotations

from searchmodel.adapters.base.adapter import ModelAdapter

# ── Model classes ────────────────────────────────────────────────────────────


class SqlModel:
    """Stand-in for a relational mapping base class."""


class DocumentModel:
    """Stand-in for a document mapping base class."""


class Article(SqlModel):
    pass


class Comment(DocumentModel):
    pass


class PlainModel:
    @classmethod
    def find(cls, ids: list) -> list:
        return [f"{cls.__name__}:{i}" for i in ids]


# ── Adapters ─────────────────────────────────────────────────────────────────


class SqlAdapter(ModelAdapter):
    class Records:
        pass

    class Callbacks:
        pass

    class Importing:
        pass


class DocumentAdapter(ModelAdapter):
    class Records:
        pass

    class Callbacks:
        pass

    class Importing:
        pass


class OverrideAdapter(ModelAdapter):
    class Records:
        pass

    class Callbacks:
        pass

    class Importing:
        pass


class RecordsOnlyAdapter:
    """Incomplete adapter: no Callbacks, no Importing."""

    class Records:
        pass


def is_sql(klass: type) -> bool:
    return issubclass(klass, SqlModel)


def is_document(klass: type) -> bool:
    return issubclass(klass, DocumentModel)


def always(klass: type) -> bool:
    return True


def never(klass: type) -> bool:
    return False
