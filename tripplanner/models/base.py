from typing import Any, Dict, Iterable, Mapping

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PlannerModel(BaseModel):
    """
    Base for every persisted record.

    Attributes are snake_case in Python; snapshots and exports use the
    camelCase aliases (``tripId``, ``startDate``). Either spelling is
    accepted on input.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def field_values(cls, data: Mapping[str, Any], exclude: Iterable[str] = ()) -> Dict[str, Any]:
        """
        Key ``data`` by attribute name, whichever spelling it uses

        Unknown keys and the attribute names in ``exclude`` are dropped, so an
        excluded field cannot be smuggled in through its alias.
        """
        names = {}
        for name, info in cls.model_fields.items():
            names[name] = name
            if info.alias:
                names[info.alias] = name
        excluded = set(exclude)
        values = {}
        for key, value in data.items():
            name = names.get(key)
            if name is not None and name not in excluded:
                values[name] = value
        return values
