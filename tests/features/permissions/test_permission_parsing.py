"""Tests for permission string parsing."""

import pytest

from authz.config.constants import PermissionAction, ResourceMarkers
from authz.core.exceptions import InvalidPermissionStringError
from authz.features.permissions.entities import (
    ParsedPermission,
    parse_permission,
    parse_permission_lenient,
    parse_scope,
)


class TestParsePermission:
    """Test cases for strict parsing of queried permissions."""

    def test_full_permission(self):
        parsed = parse_permission("User.ReadWrite.All")

        assert parsed == ParsedPermission("User", PermissionAction.READ_WRITE, ResourceMarkers.ALL)
        assert parsed.is_all_resources

    def test_missing_resource_is_default(self):
        """Test that an omitted resource parses to the default marker."""
        parsed = parse_permission("Report.Read")

        assert parsed.resource == ResourceMarkers.DEFAULT
        assert parsed.is_default_resource

    def test_explicit_default_marker_equals_omitted(self):
        """Test that the default marker and an omitted resource are the same value."""
        assert parse_permission(f"Report.Read.{ResourceMarkers.DEFAULT}") == parse_permission("Report.Read")

    def test_empty_resource_is_not_default(self):
        """Test that an empty resource segment stays an explicit resource."""
        parsed = parse_permission("Report.Read.")

        assert parsed.resource == ""
        assert not parsed.is_default_resource

    def test_extra_segments_ignored(self):
        """Test that only the third segment names the resource."""
        assert parse_permission("File.Read.docs.readme.md").resource == "docs"

    def test_scope_is_case_sensitive(self):
        assert parse_permission("user.Read").scope == "user"

    @pytest.mark.parametrize("permission, reason", [
        ("", "missing scope"),
        (".Read", "missing scope"),
        ("User", "missing action"),
        ("User.", "missing action"),
        ("User..All", "missing action"),
        ("User.Delete", "unknown action"),
        ("User.read", "unknown action"),
    ])
    def test_malformed_raises(self, permission, reason):
        """Test that malformed query strings are a contract violation."""
        with pytest.raises(InvalidPermissionStringError, match=reason):
            parse_permission(permission)

    def test_non_string_raises(self):
        with pytest.raises(InvalidPermissionStringError):
            parse_permission(None)

    def test_error_is_value_error(self):
        """Test that the contract violation is an InvalidArgument-style error."""
        with pytest.raises(ValueError):
            parse_permission("User")

    def test_str_round_trip(self):
        assert str(parse_permission("Report.Write")) == "Report.Write"
        assert str(parse_permission("Report.Write.r1")) == "Report.Write.r1"


class TestParsePermissionLenient:
    """Test cases for lenient parsing of granted permissions."""

    def test_valid_permission(self):
        assert parse_permission_lenient("User.Write.u1") == parse_permission("User.Write.u1")

    @pytest.mark.parametrize("permission", ["User.Delete.All", "User", ".Read", "", 42])
    def test_invalid_returns_none(self, permission):
        assert parse_permission_lenient(permission) is None


class TestParseScope:
    """Test cases for scope extraction."""

    def test_scope_only(self):
        assert parse_scope("User") == "User"
        assert parse_scope("User.Whatever.x") == "User"

    def test_missing_scope_raises(self):
        with pytest.raises(InvalidPermissionStringError):
            parse_scope(".Read")
