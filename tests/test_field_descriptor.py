"""Tests for building facade field descriptors."""

import pytest
from dataclasses import dataclass
from pydantic import ValidationError
from unittest.mock import MagicMock

from core.domain import EntryFacadeField, FieldKind, FieldOptions, UnknownPropertyKind
from core.services import FieldSpec, create_entry_facade, create_field_descriptor


@dataclass
class VendorFormat:
    pattern: str


@pytest.fixture
def record() -> MagicMock:
    record = MagicMock()
    record.get_property.return_value = "bob"
    record.get_meta.return_value = "some notes"
    record.get_attribute.return_value = "login"
    return record


class TestCreateFieldDescriptor:
    """Tests for create_field_descriptor."""

    def test_defaults(self, record: MagicMock) -> None:
        """Should use default flags when no options are given."""
        descriptor = create_field_descriptor(record, "Username", "property", "username")

        assert descriptor == EntryFacadeField(
            title="Username",
            field=FieldKind.PROPERTY,
            property="username",
            value="bob",
            secret=False,
            multiline=False,
            formatting=False,
            removeable=False,
        )
        assert descriptor.max_length == -1
        record.get_property.assert_called_once_with("username")

    def test_mapping_options(self, record: MagicMock) -> None:
        """Should apply recognized options from a plain mapping."""
        descriptor = create_field_descriptor(
            record,
            "Notes",
            "meta",
            "notes",
            {"multiline": True, "removeable": True},
        )

        assert descriptor.field is FieldKind.META
        assert descriptor.value == "some notes"
        assert descriptor.multiline is True
        assert descriptor.removeable is True
        assert descriptor.secret is False

    def test_ignores_unknown_options(self, record: MagicMock) -> None:
        """Should ignore option keys it does not know."""
        descriptor = create_field_descriptor(
            record, "Password", "property", "password", {"secret": True, "colour": "red"}
        )

        assert descriptor.secret is True
        assert not hasattr(descriptor, "colour")

    def test_options_model_and_overrides(self, record: MagicMock) -> None:
        """Should merge keyword overrides over an options model."""
        options = FieldOptions(secret=True, max_length=12)
        descriptor = create_field_descriptor(
            record, "PIN", "property", "pin", options, secret=False, multiline=True
        )

        assert descriptor.secret is False
        assert descriptor.multiline is True
        assert descriptor.max_length == 12

    def test_formatting_passthrough(self, record: MagicMock) -> None:
        """Should hand back the very same formatting object."""
        formatting = {"format": "DD/MM", "placeholder": ["dd", "mm"]}
        descriptor = create_field_descriptor(
            record, "Expiry", "property", "expiry", {"formatting": formatting}
        )

        assert descriptor.formatting is formatting

    def test_formatting_opaque_object(self, record: MagicMock) -> None:
        """Should accept any vendor formatting object without interpreting it."""
        formatting = VendorFormat(pattern="##/##")

        from_mapping = create_field_descriptor(
            record, "Expiry", "property", "expiry", {"formatting": formatting}
        )
        from_model = create_field_descriptor(
            record, "Expiry", "property", "expiry", FieldOptions(formatting=formatting)
        )
        from_override = create_field_descriptor(
            record, "Expiry", "property", "expiry", formatting=formatting
        )

        assert from_mapping.formatting is formatting
        assert from_model.formatting is formatting
        assert from_override.formatting is formatting

    def test_absent_value(self, record: MagicMock) -> None:
        """Should keep an absent value returned by the record."""
        record.get_property.return_value = None

        descriptor = create_field_descriptor(record, "Missing", "property", "missing")

        assert descriptor.value is None
        assert descriptor.secret is False

    def test_snapshot_not_live(self, record: MagicMock) -> None:
        """Should keep the value read at construction time."""
        first = create_field_descriptor(record, "Username", "property", "username")
        record.get_property.return_value = "alice"
        second = create_field_descriptor(record, "Username", "property", "username")

        assert first.value == "bob"
        assert second.value == "alice"
        assert record.get_property.call_count == 2

    def test_descriptor_is_frozen(self, record: MagicMock) -> None:
        """Should reject mutation after construction."""
        descriptor = create_field_descriptor(record, "Username", "property", "username")

        with pytest.raises(ValidationError):
            descriptor.value = "changed"

    def test_unknown_kind_propagates(self, record: MagicMock) -> None:
        """Should let UnknownPropertyKind reach the caller."""
        with pytest.raises(UnknownPropertyKind) as exc_info:
            create_field_descriptor(record, "X", "custom", "x")

        assert exc_info.value.kind == "custom"


class TestCreateEntryFacade:
    """Tests for create_entry_facade."""

    def test_builds_fields_in_order(self, record: MagicMock) -> None:
        """Should create one descriptor per field spec, keeping order."""
        facade = create_entry_facade(
            record,
            [
                FieldSpec("Username", FieldKind.PROPERTY, "username"),
                FieldSpec("Type", "attribute", "facade-type"),
                FieldSpec("Notes", "meta", "notes", {"multiline": True}),
            ],
            facade_type="note",
        )

        assert facade.type == "note"
        assert [f.title for f in facade.fields] == ["Username", "Type", "Notes"]
        assert [f.value for f in facade.fields] == ["bob", "login", "some notes"]
        assert facade.fields[2].multiline is True

    def test_empty_specs(self, record: MagicMock) -> None:
        """Should build an empty facade."""
        facade = create_entry_facade(record, [])

        assert facade.type == "login"
        assert facade.fields == []
