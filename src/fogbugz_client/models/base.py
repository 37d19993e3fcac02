"""
Base models and helpers shared by the FogBugz API models.

Every model is built from an ``XmlNode`` (see ``fogbugz_client.utils.xml_tree``)
through its ``from_api_response`` classmethod, and can be turned back into a
simplified dictionary for display or JSON output.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

from ..utils.xml_tree import XmlNode
from .constants import EMPTY_STRING, TRUE_VALUES

# Type variable for the return type of from_api_response
T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for all FogBugz API models.

    Instances are immutable value objects: two records built from the same
    XML compare equal.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_api_response(cls: type[T], data: XmlNode, **kwargs: Any) -> T:
        """
        Convert a parsed XML element to a model instance.

        Args:
            data: The element describing one record
            **kwargs: Additional context parameters (e.g. ``base_url``)

        Returns:
            An instance of the model

        Raises:
            NotImplementedError: If the subclass does not implement this method
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """
        Convert the model to a simplified dictionary.

        Returns:
            A dictionary with the populated fields of the model
        """
        return self.model_dump(exclude_none=True)


class XmlFieldMixin:
    """
    Helpers for reading the child-element fields FogBugz list commands return.
    """

    @staticmethod
    def text_field(node: XmlNode, tag: str, default: str = EMPTY_STRING) -> str:
        """Return the trimmed text of a child element, or ``default``."""
        value = node.text_of(tag)
        if value is None:
            return default
        return value.strip()

    @staticmethod
    def bool_field(node: XmlNode, tag: str) -> bool:
        """Interpret a FogBugz ``f``-prefixed flag ("true"/"false")."""
        value = node.text_of(tag)
        return bool(value) and value.strip().lower() in TRUE_VALUES

    @staticmethod
    def int_field(node: XmlNode, tag: str, default: int | None = None) -> int | None:
        """Return a child element's text as an int, or ``default``."""
        value = node.text_of(tag)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError:
            return default
