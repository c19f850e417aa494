"""Pydantic models for the personalization descriptor.

``personalization.json`` asks the wallet to collect user details before a
pass becomes valid. Only the shape is modelled here; field values are
passed through as given.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PersonalizationField(str, Enum):
    """Fields the wallet can collect for a personalized pass."""

    NAME = "PKPassPersonalizationFieldName"
    POSTAL_CODE = "PKPassPersonalizationFieldPostalCode"
    EMAIL_ADDRESS = "PKPassPersonalizationFieldEmailAddress"
    PHONE_NUMBER = "PKPassPersonalizationFieldPhoneNumber"


class Personalization(BaseModel):
    """Content of ``personalization.json``.

    Example:
        Personalization(
            required_personalization_fields=[PersonalizationField.NAME],
            description="Join the rewards program",
        )
    """

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    required_personalization_fields: List[PersonalizationField] = Field(
        ..., alias="requiredPersonalizationFields", min_length=1
    )
    description: str
    terms_and_conditions: Optional[str] = Field(
        default=None, alias="termsAndConditions"
    )
