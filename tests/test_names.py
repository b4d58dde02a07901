"""Tests for name table lookups."""

from ue3.names import NameTable, package_base_name


def test_get_out_of_range_returns_none() -> None:
    """Verify that a lookup miss is None rather than an exception."""
    table = NameTable(["None", "Core"])
    assert table.get(1) == "Core"
    assert table.get(2) is None
    assert table.get(-1) is None
    assert table.display(5) == ""


def test_find_returns_first_duplicate() -> None:
    """Verify that duplicate names resolve to the first index."""
    table = NameTable(["None", "Core", "Engine", "Core"])
    assert table.find("Core") == 1
    assert table.find("Missing") is None


def test_find_case_sensitivity() -> None:
    """Verify exact and case-insensitive lookups."""
    table = NameTable(["None", "CNC-Field"])
    assert table.find("cnc-field") is None
    assert table.find("cnc-field", case_sensitive=False) == 1


def test_find_for_filename() -> None:
    """Verify that directories and the extension are stripped before matching."""
    table = NameTable(["None", "CNC-Field"])
    assert table.find_for_filename("C:\\RenX\\Maps\\cnc-field.udk") == 1
    assert table.find_for_filename("/maps/CNC-Field") == 1
    assert table.find_for_filename("/maps/Other.udk") is None


def test_package_base_name() -> None:
    """Verify that only the last extension is removed."""
    assert package_base_name("a/b/Foo.Bar.upk") == "Foo.Bar"
    assert package_base_name("Foo") == "Foo"
