"""
FogBugz case models.

This module provides the Pydantic model for FogBugz cases (bugs, features,
inquiries...) as returned by the ``search`` and ``edit`` commands.
"""

import logging
from typing import Any

from pydantic import Field

from ...utils.urls import build_case_url
from ...utils.xml_tree import XmlNode
from ..base import ApiModel
from ..constants import (
    CASE_ASSIGNED_TO_EMAIL_FIELD,
    CASE_ASSIGNED_TO_FIELD,
    CASE_CONSUMED_FIELDS,
    CASE_FIX_FOR_FIELD,
    CASE_STATUS_FIELD,
    CASE_TAG_FIELD,
    CASE_TAGS_FIELD,
    CASE_TITLE_FIELD,
    EMPTY_STRING,
    FOGBUGZ_DEFAULT_ID,
    TAGS_SEPARATOR,
)

logger = logging.getLogger(__name__)


def _trimmed(value: str | None) -> str | None:
    return value.strip() if value is not None else None


def merge_residual_fields(data: XmlNode) -> dict[str, Any]:
    """
    Collect the case fields that have no dedicated attribute on FogBugzCase.

    Callers may request any column FogBugz knows about, so every child
    element the named fields did not consume is passed through under its
    own name, in document order. A single plain-text element is unwrapped and
    trimmed; repeated or nested elements are kept as they were sent.

    Args:
        data: The ``case`` element

    Returns:
        Residual field name to value
    """
    residual: dict[str, Any] = {}
    for tag, nodes in data.children.items():
        if tag in CASE_CONSUMED_FIELDS:
            continue
        if len(nodes) == 1 and nodes[0].is_text:
            residual[tag] = (nodes[0].text or EMPTY_STRING).strip()
        else:
            residual[tag] = [node.to_plain() for node in nodes]
    return residual


class FogBugzCase(ApiModel):
    """
    Model representing a FogBugz case.

    Columns without a dedicated field are kept in ``extra_fields`` and can
    also be read as attributes (``case.sFooBar``). ``raw`` keeps the whole
    case element for diagnostics.
    """

    id: str = FOGBUGZ_DEFAULT_ID
    operations: list[str] = Field(default_factory=list)
    title: str = EMPTY_STRING
    status: str = EMPTY_STRING
    url: str = EMPTY_STRING
    fix_for: str | None = None
    assigned_to: str | None = None
    assigned_to_email: str | None = None
    tags: str | None = None
    extra_fields: dict[str, Any] = Field(default_factory=dict)
    raw: dict[str, Any] = Field(default_factory=dict)

    def __getattribute__(self, name: str) -> Any:
        """
        Expose residual fields as read-only attributes.

        Args:
            name: The attribute name to access

        Returns:
            The attribute value or the residual field value
        """
        try:
            return super().__getattribute__(name)
        except AttributeError:
            try:
                extra_fields = super().__getattribute__("extra_fields")
                if name in extra_fields:
                    return extra_fields[name]
            except AttributeError:
                pass
            raise

    @classmethod
    def from_api_response(cls, data: XmlNode, **kwargs: Any) -> "FogBugzCase":
        """
        Create a FogBugzCase from a ``<case>`` element.

        Example element::

            <case ixBug="16006" operations="edit,assign,resolve,email,remind">
              <sTitle><![CDATA[AQ toolkit API: bar chart]]></sTitle>
              <sStatus><![CDATA[ Active ]]></sStatus>
              <sFixFor><![CDATA[whenever]]></sFixFor>
            </case>

        Args:
            data: The ``case`` element
            **kwargs: ``base_url`` of the FogBugz install

        Returns:
            A FogBugzCase instance
        """
        base_url = kwargs.get("base_url", EMPTY_STRING)

        case_id = data.attribute("ixBug")
        if case_id is None:
            case_id = _trimmed(data.text_of("ixBug")) or FOGBUGZ_DEFAULT_ID

        operations_attr = data.attribute("operations", EMPTY_STRING)
        operations = [op.strip() for op in operations_attr.split(",") if op.strip()]

        title = _trimmed(data.text_of(CASE_TITLE_FIELD)) or EMPTY_STRING
        status = _trimmed(data.text_of(CASE_STATUS_FIELD)) or EMPTY_STRING
        fix_for = _trimmed(data.text_of(CASE_FIX_FOR_FIELD))

        assigned_to = None
        assigned_to_email = None
        if data.has(CASE_ASSIGNED_TO_FIELD):
            assigned_to = _trimmed(data.text_of(CASE_ASSIGNED_TO_FIELD))
            assigned_to_email = _trimmed(data.text_of(CASE_ASSIGNED_TO_EMAIL_FIELD))

        tags = None
        tags_node = data.first(CASE_TAGS_FIELD)
        if tags_node is not None and tags_node.has(CASE_TAG_FIELD):
            tags = TAGS_SEPARATOR.join(
                (tag.text or EMPTY_STRING).strip()
                for tag in tags_node.children_of(CASE_TAG_FIELD)
            )

        return cls(
            id=case_id,
            operations=operations,
            title=title,
            status=status,
            url=build_case_url(base_url, case_id),
            fix_for=fix_for,
            assigned_to=assigned_to,
            assigned_to_email=assigned_to_email,
            tags=tags,
            extra_fields=merge_residual_fields(data),
            raw=data.to_plain() if not data.is_text else {},
        )

    def to_simplified_dict(self, include_raw: bool = False) -> dict[str, Any]:
        """Convert to a flat dictionary with residual fields inlined."""
        result = self.model_dump(exclude_none=True, exclude={"extra_fields", "raw"})
        for key, value in self.extra_fields.items():
            result.setdefault(key, value)
        if include_raw:
            result["raw"] = self.raw
        return result
