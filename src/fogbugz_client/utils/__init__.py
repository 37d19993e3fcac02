"""
Utility functions for the FogBugz client.
This package provides helpers shared by the client, the models and the CLI.
"""

from .logging import log_config_param, mask_sensitive, setup_logging
from .ssl import SSLIgnoreAdapter, configure_ssl_verification
from .urls import build_api_url, build_base_url
from .xml_tree import XmlNode, parse_xml

__all__ = [
    "SSLIgnoreAdapter",
    "XmlNode",
    "build_api_url",
    "build_base_url",
    "configure_ssl_verification",
    "log_config_param",
    "mask_sensitive",
    "parse_xml",
    "setup_logging",
]
