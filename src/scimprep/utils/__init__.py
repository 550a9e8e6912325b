from .logging import logger, get_logger, setup_logging, console
from .scim_path import Path, Element, MalformedPath, PathIndexError, is_urn
from .attribute_selector import (
    AttributeSelection,
    collect_attributes,
    collect_patch_attributes,
    parse_query_attributes,
    split_attribute_list,
)
from .attribute_filter import ResourceTrimmer, PredicateTrimmer, ScimResourceTrimmer

__all__ = [
    "logger",
    "get_logger",
    "setup_logging",
    "console",
    "Path",
    "Element",
    "MalformedPath",
    "PathIndexError",
    "is_urn",
    "AttributeSelection",
    "collect_attributes",
    "collect_patch_attributes",
    "parse_query_attributes",
    "split_attribute_list",
    "ResourceTrimmer",
    "PredicateTrimmer",
    "ScimResourceTrimmer",
]
