from typing import List, Optional
from pydantic import BaseModel, Field

from .base import TextAPIModel


class MicroformatsParams(BaseModel):
    url: Optional[str] = None

class Address(TextAPIModel):
    """hCard adr"""
    id: str = ""
    street_address: str = Field(default="", alias="streetAddress")
    locality: str = ""
    region: str = ""
    country_name: str = Field(default="", alias="countryName")
    postal_code: str = Field(default="", alias="postalCode")

class Name(TextAPIModel):
    """hCard n"""
    id: str = ""
    honorific_prefix: str = Field(default="", alias="honorificPrefix")
    given_name: str = Field(default="", alias="givenName")
    additional_name: str = Field(default="", alias="additionalName")
    family_name: str = Field(default="", alias="familyName")
    honorific_suffix: str = Field(default="", alias="honorificSuffix")

class Location(TextAPIModel):
    """http://microformats.org/wiki/geo"""
    id: str = ""
    latitude: str = ""
    longitude: str = ""

class HCard(TextAPIModel):
    """http://microformats.org/wiki/hcard"""
    id: str = ""
    full_name: str = Field(default="", alias="fullName")
    structured_name: Name = Field(default_factory=Name, alias="structuredName")
    nick_name: str = Field(default="", alias="nickName")
    email: str = ""
    photo: str = ""
    url: str = ""
    telephone_number: str = Field(default="", alias="telephoneNumber")
    birthday: str = ""
    category: str = ""
    note: str = ""
    logo: str = ""
    location: Location = Field(default_factory=Location)
    address: Address = Field(default_factory=Address)
    organization: str = ""

class MicroformatsResponse(TextAPIModel):
    hcards: List[HCard] = Field(default_factory=list, alias="hCards")
