"""
Common FogBugz entity models.

This module provides Pydantic models for the lookup lists FogBugz exposes:
projects, areas, priorities, people and statuses.
"""

import logging
from typing import Any

from ...utils.urls import build_area_url, build_project_url
from ...utils.xml_tree import XmlNode
from ..base import ApiModel, XmlFieldMixin
from ..constants import EMPTY_STRING, FOGBUGZ_DEFAULT_ID

logger = logging.getLogger(__name__)


class FogBugzProject(ApiModel, XmlFieldMixin):
    """
    Model representing a FogBugz project.
    """

    id: str = FOGBUGZ_DEFAULT_ID
    name: str = EMPTY_STRING
    owner_id: str = EMPTY_STRING
    owner: str = EMPTY_STRING
    email: str = EMPTY_STRING
    phone: str = EMPTY_STRING
    inbox: bool = False
    workflow_id: str = EMPTY_STRING
    deleted: bool = False
    url: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: XmlNode, **kwargs: Any) -> "FogBugzProject":
        """
        Create a FogBugzProject from a ``<project>`` element.

        Args:
            data: The ``project`` element
            **kwargs: ``base_url`` of the FogBugz install

        Returns:
            A FogBugzProject instance
        """
        project_id = cls.text_field(data, "ixProject", FOGBUGZ_DEFAULT_ID)
        return cls(
            id=project_id,
            name=cls.text_field(data, "sProject"),
            owner_id=cls.text_field(data, "ixPersonOwner"),
            owner=cls.text_field(data, "sPersonOwner"),
            email=cls.text_field(data, "sEmail"),
            phone=cls.text_field(data, "sPhone"),
            inbox=cls.bool_field(data, "fInbox"),
            workflow_id=cls.text_field(data, "ixWorkflow"),
            deleted=cls.bool_field(data, "fDeleted"),
            url=build_project_url(kwargs.get("base_url", EMPTY_STRING), project_id),
        )


class FogBugzArea(ApiModel, XmlFieldMixin):
    """
    Model representing a FogBugz area (a subdivision of a project).
    """

    id: str = FOGBUGZ_DEFAULT_ID
    name: str = EMPTY_STRING
    project_id: str = EMPTY_STRING
    project: str = EMPTY_STRING
    owner_id: str = EMPTY_STRING
    owner: str = EMPTY_STRING
    type: int | None = None
    doc_count: int | None = None
    url: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: XmlNode, **kwargs: Any) -> "FogBugzArea":
        """
        Create a FogBugzArea from an ``<area>`` element.

        Args:
            data: The ``area`` element
            **kwargs: ``base_url`` of the FogBugz install

        Returns:
            A FogBugzArea instance
        """
        area_id = cls.text_field(data, "ixArea", FOGBUGZ_DEFAULT_ID)
        return cls(
            id=area_id,
            name=cls.text_field(data, "sArea"),
            project_id=cls.text_field(data, "ixProject"),
            project=cls.text_field(data, "sProject"),
            owner_id=cls.text_field(data, "ixPersonOwner"),
            owner=cls.text_field(data, "sPersonOwner"),
            type=cls.int_field(data, "nType"),
            doc_count=cls.int_field(data, "cDoc"),
            url=build_area_url(kwargs.get("base_url", EMPTY_STRING), area_id),
        )


class FogBugzPriority(ApiModel, XmlFieldMixin):
    """
    Model representing a FogBugz priority level.
    """

    id: str = FOGBUGZ_DEFAULT_ID
    name: str = EMPTY_STRING
    default: bool = False

    @classmethod
    def from_api_response(cls, data: XmlNode, **kwargs: Any) -> "FogBugzPriority":
        return cls(
            id=cls.text_field(data, "ixPriority", FOGBUGZ_DEFAULT_ID),
            name=cls.text_field(data, "sPriority"),
            default=cls.bool_field(data, "fDefault"),
        )


class FogBugzPerson(ApiModel, XmlFieldMixin):
    """
    Model representing a FogBugz user.
    """

    id: str = FOGBUGZ_DEFAULT_ID
    full_name: str = EMPTY_STRING
    email: str = EMPTY_STRING
    phone: str = EMPTY_STRING
    administrator: bool = False
    community: bool = False
    virtual: bool = False
    deleted: bool = False
    homepage: str = EMPTY_STRING
    locale: str = EMPTY_STRING
    language: str = EMPTY_STRING
    time_zone_key: str = EMPTY_STRING
    last_activity: str = EMPTY_STRING
    working_on: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: XmlNode, **kwargs: Any) -> "FogBugzPerson":
        """
        Create a FogBugzPerson from a ``<person>`` element.

        Args:
            data: The ``person`` element
            **kwargs: Unused

        Returns:
            A FogBugzPerson instance
        """
        return cls(
            id=cls.text_field(data, "ixPerson", FOGBUGZ_DEFAULT_ID),
            full_name=cls.text_field(data, "sFullName"),
            email=cls.text_field(data, "sEmail"),
            phone=cls.text_field(data, "sPhone"),
            administrator=cls.bool_field(data, "fAdministrator"),
            community=cls.bool_field(data, "fCommunity"),
            virtual=cls.bool_field(data, "fVirtual"),
            deleted=cls.bool_field(data, "fDeleted"),
            homepage=cls.text_field(data, "sHomepage"),
            locale=cls.text_field(data, "sLocale"),
            language=cls.text_field(data, "sLanguage"),
            time_zone_key=cls.text_field(data, "sTimeZoneKey"),
            last_activity=cls.text_field(data, "dtLastActivity"),
            working_on=cls.text_field(data, "ixBugWorkingOn"),
        )


class FogBugzStatus(ApiModel, XmlFieldMixin):
    """
    Model representing a FogBugz case status.
    """

    id: str = FOGBUGZ_DEFAULT_ID
    name: str = EMPTY_STRING
    category_id: str = EMPTY_STRING
    work_done: bool = False
    resolved: bool = False
    duplicate: bool = False
    deleted: bool = False
    order: int | None = None

    @classmethod
    def from_api_response(cls, data: XmlNode, **kwargs: Any) -> "FogBugzStatus":
        return cls(
            id=cls.text_field(data, "ixStatus", FOGBUGZ_DEFAULT_ID),
            name=cls.text_field(data, "sStatus"),
            category_id=cls.text_field(data, "ixCategory"),
            work_done=cls.bool_field(data, "fWorkDone"),
            resolved=cls.bool_field(data, "fResolved"),
            duplicate=cls.bool_field(data, "fDuplicate"),
            deleted=cls.bool_field(data, "fDeleted"),
            order=cls.int_field(data, "iOrder"),
        )
