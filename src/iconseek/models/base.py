"""
Base model shared by the catalog models.
"""

from pydantic import BaseModel, ConfigDict


class IconseekBaseModel(BaseModel):
    """
    Base model for iconseek.
    Common configuration for models built from Iconify API payloads.
    """

    model_config = ConfigDict(
        # Validate values on assignment
        validate_assignment=True,
        # The API adds fields over time; unknown keys are not an error
        extra="ignore",
        # Allow construction by field name when an alias is declared
        populate_by_name=True,
    )
