"""Allowed-value constraints for free-text DTO fields.

An :class:`AllowedValues` validator is built from a provider and a lookup
key. The provider is consulted once, when the validator is created, so a
misconfigured key fails at import/registration time rather than on the first
request. ``None`` always passes; any other value must match one of the
allowed entries exactly.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Protocol, Sequence, Tuple

from pydantic import AfterValidator
from pydantic_core import PydanticCustomError


logger = logging.getLogger(__name__)

REJECTION_TEMPLATE = "'{value}' is not valid. Allowed values are: [{allowed}]"


class AllowedValuesConfigurationError(LookupError):
    pass


class AllowedValuesProvider(Protocol):
    def get_allowed(self, key: str) -> Sequence[str]:
        ...


class StaticAllowedValuesProvider:
    def __init__(self, values: Mapping[str, Sequence[str]]):
        self._values: Dict[str, Tuple[str, ...]] = {key: tuple(allowed) for key, allowed in values.items()}

    def get_allowed(self, key: str) -> Sequence[str]:
        try:
            return self._values[key]
        except KeyError:
            raise AllowedValuesConfigurationError(f"No allowed values configured for '{key}'") from None


CLINICAL_VOCABULARY = StaticAllowedValuesProvider({
    "administration_route": ("Intramuscular", "Subcutaneous", "Intradermal", "Intravenous", "Oral", "Intranasal"),
    "administration_site": (
        "Left Deltoid",
        "Right Deltoid",
        "Left Thigh",
        "Right Thigh",
        "Left Gluteus",
        "Right Gluteus",
        "Left Arm",
        "Right Arm",
    ),
    "imaging_priority": ("Routine", "Urgent", "STAT"),
    "imaging_criticality": ("Low", "High", "Unable to Assess"),
    "order_status": ("Ordered", "Scheduled", "In Progress", "Completed", "Cancelled"),
    "frequency_unit": ("Day", "Week", "Month", "Year"),
})


class AllowedValues:
    def __init__(self, key: str, provider: AllowedValuesProvider = CLINICAL_VOCABULARY):
        self.key = key
        self.allowed: Tuple[str, ...] = tuple(provider.get_allowed(key))
        self.allowed_string = ",".join(self.allowed)

    def is_valid(self, value: Optional[str]) -> bool:
        return value is None or value in self.allowed

    def message(self, value: Any) -> str:
        return REJECTION_TEMPLATE.format(value=value, allowed=self.allowed_string)

    def __call__(self, value: Optional[str]) -> Optional[str]:
        if not self.is_valid(value):
            raise PydanticCustomError(
                "allowed_values",
                REJECTION_TEMPLATE,
                {"value": value, "allowed": self.allowed_string},
            )
        return value


def allowed_values(key: str, provider: Optional[AllowedValuesProvider] = None) -> AfterValidator:
    """Field annotation: ``Annotated[Optional[str], allowed_values("order_status")]``."""
    return AfterValidator(AllowedValues(key, provider or CLINICAL_VOCABULARY))


class AllowedValuesRegistry:
    """Explicit mapping of field identifiers to allowed-value validators."""

    def __init__(self, provider: AllowedValuesProvider = CLINICAL_VOCABULARY):
        self.provider = provider
        self._validators: Dict[str, AllowedValues] = {}

    def register(self, field: str, key: str) -> AllowedValues:
        validator = AllowedValues(key, self.provider)
        self._validators[field] = validator
        logger.debug(f"Registered allowed values for {field}: {validator.allowed_string}")
        return validator

    def __contains__(self, field: str) -> bool:
        return field in self._validators

    def __getitem__(self, field: str) -> AllowedValues:
        return self._validators[field]

    def validate(self, field: str, value: Optional[str]) -> bool:
        return self._validators[field].is_valid(value)

    def violations(self, values: Mapping[str, Optional[str]]) -> Dict[str, str]:
        errors: Dict[str, str] = {}
        for field, value in values.items():
            validator = self._validators.get(field)
            if validator is not None and not validator.is_valid(value):
                errors[field] = validator.message(value)
        return errors
