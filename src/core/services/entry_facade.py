"""Construcción de facades y resolución de URLs de un registro.

This module holds the logic behind the entry facade: turning a record's
typed values into presentable field descriptors, and picking which of its
arbitrarily-named properties are URLs. Everything here is synchronous and
stateless; the only side-effect is reading from the record, so callers may
share these helpers across threads as long as the record tolerates
concurrent reads.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

from core.domain.errors import UnknownPropertyKind
from core.domain.models import (
    EntryFacade,
    EntryFacadeField,
    FieldKind,
    FieldOptions,
    URLPreference,
)
from core.interfaces.record import EntryRecord

logger = logging.getLogger(__name__)

ENTRY_URL_TYPE_ANY = URLPreference.ANY.value
ENTRY_URL_TYPE_GENERAL = URLPreference.GENERAL.value
ENTRY_URL_TYPE_ICON = URLPreference.ICON.value
ENTRY_URL_TYPE_LOGIN = URLPreference.LOGIN.value

# Token url/uri delimitado; solo las grafías url, URL y Url (idem uri).
# `\b` ASCII: letras como "é" cuentan como separador.
_URL_PROP = re.compile(r"(^|[a-zA-Z0-9_-]|\b)(ur[li]|UR[LI]|Ur[li])(\b|$|[_-])", re.ASCII)
_URL_PROP_ICON = re.compile(r"icon[\s_-]*ur[li]", re.IGNORECASE)
_URL_PROP_GENERAL = re.compile(r"^ur[li]$", re.IGNORECASE)
_URL_PROP_LOGIN = re.compile(r"login", re.IGNORECASE)

_LOGIN_FIELDS: tuple[tuple[str, str, dict[str, Any]], ...] = (
    ("Title", "title", {}),
    ("Username", "username", {}),
    ("Password", "password", {"secret": True}),
    ("URL", "url", {}),
)


@dataclass(frozen=True)
class EntryValueResult:
    """Resultado explícito de leer un valor del registro."""

    value: str | None = None
    error: UnknownPropertyKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class FieldSpec:
    """Receta de un campo: qué leer del registro y cómo presentarlo."""

    title: str
    kind: FieldKind | str
    name: str
    options: FieldOptions | Mapping[str, Any] | None = None


def _coerce_kind(kind: FieldKind | str) -> FieldKind | None:
    if isinstance(kind, FieldKind):
        return kind
    try:
        return FieldKind(kind)
    except ValueError:
        return None


def resolve_entry_value(record: EntryRecord, kind: FieldKind | str, name: str) -> EntryValueResult:
    """Lee `name` del espacio de nombres `kind` sin lanzar excepciones."""

    resolved = _coerce_kind(kind)
    if resolved is FieldKind.PROPERTY:
        return EntryValueResult(value=record.get_property(name))
    if resolved is FieldKind.META:
        return EntryValueResult(value=record.get_meta(name))
    if resolved is FieldKind.ATTRIBUTE:
        return EntryValueResult(value=record.get_attribute(name))
    return EntryValueResult(error=UnknownPropertyKind(kind))


def get_entry_value(record: EntryRecord, kind: FieldKind | str, name: str) -> str | None:
    """Get a value on a record for a specific property kind.

    Raises:
        UnknownPropertyKind: `kind` is not property, meta or attribute.
    """

    result = resolve_entry_value(record, kind, name)
    if result.error is not None:
        raise result.error
    return result.value


def _coerce_options(
    options: FieldOptions | Mapping[str, Any] | None,
    overrides: Mapping[str, Any],
) -> FieldOptions:
    if options is None:
        data: dict[str, Any] = {}
    elif isinstance(options, FieldOptions):
        # getattr y no model_dump: model_dump serializaría `formatting`.
        data = {name: getattr(options, name) for name in FieldOptions.model_fields}
    else:
        data = dict(options)
    data.update(overrides)
    return FieldOptions.model_validate(data)


def create_field_descriptor(
    record: EntryRecord,
    title: str,
    kind: FieldKind | str,
    name: str,
    options: FieldOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> EntryFacadeField:
    """Create a descriptor for a field to be used within a facade.

    The value is read from the record on every call; the returned descriptor
    is a snapshot and will not follow later changes to the record.
    """

    value = get_entry_value(record, kind, name)
    opts = _coerce_options(options, overrides)
    logger.debug("Built field descriptor %s:%s (%s)", kind, name, title)
    return EntryFacadeField(
        title=title,
        field=FieldKind(kind),
        property=name,
        value=value,
        secret=opts.secret,
        multiline=opts.multiline,
        formatting=opts.formatting,
        removeable=opts.removeable,
        max_length=opts.max_length,
    )


def create_entry_facade(
    record: EntryRecord,
    specs: Iterable[FieldSpec],
    facade_type: str = "login",
) -> EntryFacade:
    """Construye un facade con un descriptor por cada `FieldSpec`."""

    fields = [
        create_field_descriptor(record, spec.title, spec.kind, spec.name, spec.options)
        for spec in specs
    ]
    return EntryFacade(type=facade_type, fields=fields)


def default_login_field_specs(record: EntryRecord) -> list[FieldSpec]:
    """Disposición estándar de un login más las propiedades propias del registro.

    Las propiedades extra solo se añaden si el registro expone
    `property_names()`; son eliminables por el usuario.
    """

    specs = [
        FieldSpec(title, FieldKind.PROPERTY, name, options)
        for title, name, options in _LOGIN_FIELDS
    ]
    property_names = getattr(record, "property_names", None)
    if callable(property_names):
        standard = {name for _, name, _ in _LOGIN_FIELDS}
        for name in property_names():
            if name in standard:
                continue
            specs.append(FieldSpec(name, FieldKind.PROPERTY, name, {"removeable": True}))
    return specs


def _rank(keys: Sequence[str], pattern: re.Pattern[str]) -> list[str]:
    # sorted() es estable: los empates conservan el orden de entrada.
    return sorted(keys, key=lambda key: 0 if pattern.search(key) else 1)


def get_entry_urls(
    properties: Mapping[str, str | None],
    preference: URLPreference | str = URLPreference.ANY,
) -> list[str | None]:
    """Get URLs from a record's properties, with preferential sorting.

    Only URL-shaped keys are considered, in the mapping's own order:

    - ``any``: every URL value.
    - ``general``: keys that are exactly ``url``/``uri`` come first.
    - ``login``: keys containing ``login`` come first.
    - ``icon``: only the first icon URL, or an empty list.

    Unrecognized preferences behave like ``any``.
    """

    url_ref = {key: value for key, value in properties.items() if _URL_PROP.search(key)}

    pref = URLPreference.coerce(preference)
    if pref.value != preference:
        logger.debug("Unknown URL preference %r, falling back to 'any'", preference)

    if pref is URLPreference.GENERAL:
        return [url_ref[key] for key in _rank(list(url_ref), _URL_PROP_GENERAL)]
    if pref is URLPreference.LOGIN:
        return [url_ref[key] for key in _rank(list(url_ref), _URL_PROP_LOGIN)]
    if pref is URLPreference.ICON:
        icon_key = next((key for key in url_ref if _URL_PROP_ICON.search(key)), None)
        return [url_ref[icon_key]] if icon_key is not None else []
    return list(url_ref.values())


def get_entry_facade_urls(
    facade: EntryFacade | Sequence[EntryFacadeField],
    preference: URLPreference | str = URLPreference.ANY,
) -> list[str | None]:
    """Resuelve URLs a partir de los campos `property` de un facade."""

    fields = facade.fields if isinstance(facade, EntryFacade) else facade
    props: dict[str, str | None] = {}
    for item in fields:
        if item.field is FieldKind.PROPERTY:
            props[item.property] = item.value
    return get_entry_urls(props, preference)


def is_valid_property(name: str, known_names: Iterable[str] | None = None) -> bool:
    """Check if a property name belongs to the recognized set.

    Legacy: no current caller depends on it. Without `known_names` there is
    nothing to match against and every name is rejected.
    """

    if known_names is None:
        return False
    return name in set(known_names)
