from core.services.entry_facade import (
    ENTRY_URL_TYPE_ANY,
    ENTRY_URL_TYPE_GENERAL,
    ENTRY_URL_TYPE_ICON,
    ENTRY_URL_TYPE_LOGIN,
    EntryValueResult,
    FieldSpec,
    create_entry_facade,
    create_field_descriptor,
    default_login_field_specs,
    get_entry_facade_urls,
    get_entry_urls,
    get_entry_value,
    is_valid_property,
    resolve_entry_value,
)

__all__ = [
    "ENTRY_URL_TYPE_ANY",
    "ENTRY_URL_TYPE_GENERAL",
    "ENTRY_URL_TYPE_ICON",
    "ENTRY_URL_TYPE_LOGIN",
    "EntryValueResult",
    "FieldSpec",
    "create_entry_facade",
    "create_field_descriptor",
    "default_login_field_specs",
    "get_entry_facade_urls",
    "get_entry_urls",
    "get_entry_value",
    "is_valid_property",
    "resolve_entry_value",
]
