from dataclasses import fields


class RowMixin:
    """Build a dataclass from a backend row.

    ``COLUMN_MAP`` maps backend column names onto attribute names where they
    differ; everything else is matched by name and unknown columns are dropped.
    """

    COLUMN_MAP = {}

    @classmethod
    def from_row(cls, row):
        known = {f.name for f in fields(cls)}
        data = {}
        for key, value in (row or {}).items():
            attr = cls.COLUMN_MAP.get(key, key)
            if attr in known:
                data[attr] = value
        return cls(**data)
