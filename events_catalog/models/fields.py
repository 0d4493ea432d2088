"""Request payload models for creating and updating events.

Every field is optional and independently nullable: the same model carries a
full create body or a partial update. Structural checks (types, dates,
numbers) happen here; required and cross-field rules are applied afterwards
by ``events_catalog.utils.validation`` on the merged field set.
"""

from datetime import date as DateType
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SpeakerFields(BaseModel):
    """A speaker entry as sent by clients."""
    name: Optional[str] = None
    title: Optional[str] = None
    image: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class EventFields(BaseModel):
    """Event fields accepted by the create and update endpoints."""
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    type: Optional[str] = None
    date: Optional[DateType] = None
    time: Optional[str] = None
    image: Optional[str] = None
    hosted_by: Optional[str] = Field(None, alias='hostedBy')
    venue: Optional[str] = None
    address: Optional[str] = None
    ticket_price: Optional[float] = Field(None, alias='ticketPrice', allow_inf_nan=False)
    speakers: Optional[List[SpeakerFields]] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None
    dress_code: Optional[str] = Field(None, alias='dressCode')
    age_restriction: Optional[str] = Field(None, alias='ageRestriction')

    @field_validator('title')
    @classmethod
    def trim_title(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() if value is not None else value

    def to_field_map(self, partial: bool = False) -> Dict[str, Any]:
        """
        Snake_case field map of the payload.

        Args:
            partial: Only include fields the client actually sent (an explicit
                     null is kept so it can clear a stored value)
        """
        fields = {}
        for name in self.__class__.model_fields:
            if partial and name not in self.model_fields_set:
                continue
            fields[name] = getattr(self, name)
        if fields.get('speakers') is not None:
            fields['speakers'] = [speaker.to_document() for speaker in fields['speakers']]
        return fields
