from meta_collector.config import Settings, load_settings
from meta_collector.collector import extract_meta, fetch_document, parse_file, parse_html
from meta_collector.errors import FetchError, InputError, MetaCollectorError, SerializationError, TokenizeError
from meta_collector.handlers import MetaHandler, attrs_handler
from meta_collector.models import App, Attributes, Icon, LinkAttrs, MetaAttrs, Player, Twitter, Video
from meta_collector.serialize import dumps, to_dict

__all__ = [
    "__version__",
    "App",
    "Attributes",
    "FetchError",
    "Icon",
    "InputError",
    "LinkAttrs",
    "MetaAttrs",
    "MetaCollectorError",
    "MetaHandler",
    "Player",
    "SerializationError",
    "Settings",
    "TokenizeError",
    "Twitter",
    "Video",
    "attrs_handler",
    "dumps",
    "extract_meta",
    "fetch_document",
    "load_settings",
    "parse_file",
    "parse_html",
    "to_dict",
]

__version__ = "0.1.0"
