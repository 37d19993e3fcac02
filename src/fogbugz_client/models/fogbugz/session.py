"""
FogBugz session models.
"""

from ..base import ApiModel


class LogonResult(ApiModel):
    """
    Result of a logon.

    ``cached`` is True when the token came from the token store and no
    request was made.
    """

    token: str
    cached: bool = False
