from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from ...errors import ConfigurationError


# Endpoint fields copied over scraped values, in merge order.
METADATA_FIELDS = ("parentUUID", "prefLabel", "strapline", "description", "descriptionXML")


@dataclass(frozen=True)
class Endpoint:
    uuid: str
    url: Optional[str] = None
    rule_set_name: Optional[str] = None
    parentUUID: Optional[str] = None
    prefLabel: Optional[str] = None
    strapline: Optional[str] = None
    description: Optional[str] = None
    descriptionXML: Optional[str] = None
    imageUrl: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Endpoint":
        if not isinstance(data, dict):
            raise ConfigurationError(f"Endpoint must be an object, got {type(data).__name__}")
        uuid = data.get("uuid")
        if not uuid:
            raise ConfigurationError(f"Endpoint without uuid: {data}")

        rule_set_name = data.get("ruleSetName")
        if rule_set_name is None:
            rule_set_name = data.get("ruleSet")
        image_url = data.get("imageUrl")
        if image_url is None:
            image_url = data.get("_imageUrl")

        return cls(
            uuid=uuid,
            url=data.get("url"),
            rule_set_name=rule_set_name,
            parentUUID=data.get("parentUUID"),
            prefLabel=data.get("prefLabel"),
            strapline=data.get("strapline"),
            description=data.get("description"),
            descriptionXML=data.get("descriptionXML"),
            imageUrl=image_url,
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["ruleSetName"] = data.pop("rule_set_name")
        return {k: v for k, v in data.items() if v is not None}
