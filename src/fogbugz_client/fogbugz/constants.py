"""Constants specific to FogBugz operations."""

# Default number of cases returned by a search
DEFAULT_MAX_RESULTS = 20

# Columns requested for cases when the caller does not pick any
DEFAULT_CASE_COLUMNS: tuple[str, ...] = (
    "sTitle",
    "sStatus",
    "sPersonAssignedTo",
    "sFixFor",
    "tags",
    "sEmailAssignedTo",
)

# Every column FogBugz can return for a case
ALL_CASE_COLUMNS: frozenset[str] = frozenset(
    {
        "dFixFor",
        "dtClosed",
        "dtDue",
        "dtLastUpdated",
        "dtLastView",
        "dtOpened",
        "dtResolved",
        "fForwarded",
        "fOpen",
        "fReplied",
        "fScoutStopReporting",
        "fSubscribed",
        "hrsCurrentEst",
        "hrsElapsed",
        "hrsOrigEst",
        "iPersonClosedBy",
        "ixArea",
        "ixBug",
        "ixBugChildren",
        "ixBugEventLastView",
        "ixBugEventLatest",
        "ixBugEventlatestText",
        "ixBugParent",
        "ixCategory",
        "ixDiscussTopic",
        "ixFixFor",
        "ixGroup",
        "ixMailbox",
        "ixPersonAssignedTo",
        "ixPersonLastEditedBy",
        "ixPersonOpenedBy",
        "ixPersonResolvedBy",
        "ixPriority",
        "ixProject",
        "ixRelatedBugs",
        "ixStatus",
        "sArea",
        "sCategory",
        "sComputer",
        "sEmailAssignedTo",
        "sFixFor",
        "sLatestTextSummary",
        "sOriginalTitle",
        "sPersonAssignedTo",
        "sPriority",
        "sProject",
        "sReleaseNotes",
        "sScoutDescription",
        "sScoutMessage",
        "sStatus",
        "sTicket",
        "sTitle",
        "sVersion",
        "tags",
    }
)

# Legacy API command names
CMD_LOGON = "logon"
CMD_LOGOFF = "logoff"
CMD_SEARCH = "search"
CMD_EDIT = "edit"
CMD_LIST_FILTERS = "listFilters"
CMD_SET_CURRENT_FILTER = "setCurrentFilter"
CMD_LIST_PROJECTS = "listProjects"
CMD_LIST_AREAS = "listAreas"
CMD_LIST_PRIORITIES = "listPriorities"
CMD_LIST_PEOPLE = "listPeople"
CMD_LIST_STATUSES = "listStatuses"
