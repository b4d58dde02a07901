"""Tests for the content packager."""

import os

from tests.conftest import GUID_A, GUID_B
from ue3.package import UE3Package
from ue3.packager import generate_package
from ue3.types import Guid, PackageExtension, ResolvedPackage


def test_content_tree(write_package, tmp_path, level_imports) -> None:
    """Verify the GUID-named content tree and copied files."""
    names, imports = level_imports
    level = write_package("Custom/CNC-Test.udk", names=names, imports=imports, guid=GUID_A)
    dep_path = write_package("Game/CookedPC/B.u", guid=GUID_B)
    config_dir = tmp_path / "Game" / "Config"
    config_dir.mkdir()
    (config_dir / "CNC-Test.ini").write_text("[Map]\n")

    dependency = ResolvedPackage(name_index=4, name="B")
    dependency.resolve(dep_path, Guid(*GUID_B), PackageExtension.U)
    missing = ResolvedPackage(name_index=5, name="Missing")

    out = tmp_path / "out"
    packager = generate_package(UE3Package(level), [dependency, missing],
                                str(tmp_path / "Game"), str(out))

    root = out / str(Guid(*GUID_A)) / "UDKGame"
    content = root / "CookedPC" / "Custom_Content"
    assert packager.root == str(root)
    assert (root / "Config" / "CNC-Test.ini").read_text() == "[Map]\n"
    assert sorted(os.listdir(content)) == ["B.u", "CNC-Test.udk"]
    assert len(packager.copied) == 3
    assert packager.skipped == ["Missing"]


def test_missing_config_is_skipped(write_package, tmp_path) -> None:
    """Verify that packaging continues without a config file."""
    level = write_package("Level.upk", names=("None", "Level"))
    out = tmp_path / "out"
    packager = generate_package(UE3Package(level), [], str(tmp_path / "Game"), str(out))

    assert len(packager.skipped) == 1
    assert os.listdir(os.path.join(packager.root, "Config")) == []
    assert os.listdir(packager.content_dir) == ["Level.upk"]
