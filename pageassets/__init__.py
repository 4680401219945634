"""Asset classification, inlining policy and markup rendering for site exports."""

from .classifier import category_to_directory, classify
from .config import ConfigError, ExportOptions, PageAssetsConfig, load_config
from .encoding import data_uri
from .mime import extension_from_mime, mime_from_extension
from .minify import HtmlMinifier, MinifyResult, Minifier
from .models import InlinePolicy, LoadTiming, Mutability, RenderMode, ResourceCategory
from .policy import is_inline, is_reference, resolve_mode
from .registry import DirectoryLayout, ResourceRegistry
from .resource import Resource

__all__ = [
    "ConfigError",
    "DirectoryLayout",
    "ExportOptions",
    "HtmlMinifier",
    "InlinePolicy",
    "LoadTiming",
    "MinifyResult",
    "Minifier",
    "Mutability",
    "PageAssetsConfig",
    "RenderMode",
    "Resource",
    "ResourceCategory",
    "ResourceRegistry",
    "category_to_directory",
    "classify",
    "data_uri",
    "extension_from_mime",
    "is_inline",
    "is_reference",
    "load_config",
    "mime_from_extension",
    "resolve_mode",
]
