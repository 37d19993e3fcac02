"""Module for FogBugz lookup list operations (projects, areas, people...)."""

import logging
from typing import TypeVar

from ..exceptions import UnknownError
from ..models.base import ApiModel
from ..models.fogbugz import (
    FogBugzArea,
    FogBugzPerson,
    FogBugzPriority,
    FogBugzProject,
    FogBugzStatus,
)
from ..utils.xml_tree import XmlNode
from .client import FogBugzClient
from .constants import (
    CMD_LIST_AREAS,
    CMD_LIST_PEOPLE,
    CMD_LIST_PRIORITIES,
    CMD_LIST_PROJECTS,
    CMD_LIST_STATUSES,
)

logger = logging.getLogger("fogbugz-client")

M = TypeVar("M", bound=ApiModel)


class ListsMixin(FogBugzClient):
    """Mixin for FogBugz list operations.

    Each list reply has the shape ``response/<plural>/<singular>*``; an empty
    list is treated as a malformed reply, as FogBugz never has zero of any
    of these.
    """

    def _extract_list(
        self, response: XmlNode, plural: str, singular: str, model: type[M]
    ) -> list[M]:
        container = response.first(plural)
        items: list[M] = []
        if container is not None:
            items = [
                model.from_api_response(node, base_url=self.base_url)
                for node in container.children_of(singular)
            ]

        if not items:
            logger.error(f"FogBugz response did not contain any {singular}")
            raise UnknownError()

        return items

    def list_projects(self) -> list[FogBugzProject]:
        """
        Get the projects the logged on user can write to.

        Returns:
            List of FogBugzProject
        """
        response = self._execute(CMD_LIST_PROJECTS, {"fWrite": 1})
        return self._extract_list(response, "projects", "project", FogBugzProject)

    def list_areas(self) -> list[FogBugzArea]:
        """
        Get the areas the logged on user can write to.

        Returns:
            List of FogBugzArea
        """
        response = self._execute(CMD_LIST_AREAS, {"fWrite": 1})
        return self._extract_list(response, "areas", "area", FogBugzArea)

    def list_priorities(self) -> list[FogBugzPriority]:
        response = self._execute(CMD_LIST_PRIORITIES)
        return self._extract_list(response, "priorities", "priority", FogBugzPriority)

    def list_people(self) -> list[FogBugzPerson]:
        response = self._execute(CMD_LIST_PEOPLE)
        return self._extract_list(response, "people", "person", FogBugzPerson)

    def list_statuses(self) -> list[FogBugzStatus]:
        response = self._execute(CMD_LIST_STATUSES)
        return self._extract_list(response, "statuses", "status", FogBugzStatus)
