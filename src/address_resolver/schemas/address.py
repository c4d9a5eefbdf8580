"""Pydantic v2 schemas for address suggestions and the confirmed hand-off."""

from pydantic import BaseModel, ConfigDict, Field

from address_resolver.lib.resolver import AddressRecord, CanonicalAddress, display_lines


class AddressSuggestion(BaseModel):
    """A ranked candidate as shown in the result list."""

    line1: str
    line2: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @classmethod
    def from_record(cls, record: AddressRecord) -> "AddressSuggestion":
        line1, line2 = display_lines(record)
        return cls(line1=line1, line2=line2, latitude=record.latitude, longitude=record.longitude)


class AddressHandoff(BaseModel):
    """Confirmed address in the consumer's output schema."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    address_line1: str = Field(alias="addressLine1")
    address_line2: str = Field(default="", alias="addressLine2")
    city: str
    state: str
    zip: str

    @classmethod
    def from_canonical(cls, canonical: CanonicalAddress) -> "AddressHandoff":
        return cls.model_validate(canonical.to_dict())
