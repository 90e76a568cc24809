import json
import tempfile
import unittest
import zipfile
from pathlib import Path
from gm_package_exporter.errors import MissingSelectionError
from gm_package_exporter.exporter import prepare_export, export_package
from gm_package_exporter.project.models import PackageFields, ResourceIdentity
from tests.project_builder import make_project

FIELDS = PackageFields(display_name="Utils", id="com.me.utils", publisher="Me", version="1.0.0")

class TestExportPipeline(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)
        self.project = make_project(self.tmp_path / "MyGame")
        self.output = self.tmp_path / "Utils.yymps"

    def tearDown(self):
        self._tmp.cleanup()

    def test_select_everything(self):
        selection = prepare_export(self.project, FIELDS, "*")
        self.assertEqual(len(selection.resources), 4)
        self.assertEqual(
            selection.folders,
            ["folders/Scripts.yy", "folders/Scripts/Sub.yy", "folders/Rooms.yy"]
        )
        self.assertEqual(selection.unfiltered_tables, [])

    def test_export_sub_folder(self):
        selection = prepare_export(self.project, FIELDS, "Scripts/Sub")
        self.assertEqual(selection.resources, [ResourceIdentity("foo", "scripts/foo/foo.yy")])
        
        report = export_package(selection, self.output, workers=2, show_progress=False)
        
        self.assertEqual(report["selected_resources_count"], 1)
        self.assertEqual(report["copied_resources_count"], 1)
        self.assertEqual(report["failed_copies"], [])
        
        with zipfile.ZipFile(self.output) as archive:
            self.assertEqual(
                sorted(archive.namelist()),
                ["MyGame.yyp", "metadata.json", "scripts/foo/foo.gml", "scripts/foo/foo.yy"]
            )
            document = json.loads(archive.read("MyGame.yyp"))
            summary = json.loads(archive.read("metadata.json"))
        
        self.assertEqual(document["resources"], [{"id": {"name": "foo", "path": "scripts/foo/foo.yy"}}])
        self.assertEqual(
            [f["folderPath"] for f in document["Folders"]],
            ["folders/Scripts.yy", "folders/Scripts/Sub.yy"]
        )
        self.assertEqual(document["RoomOrderNodes"], [])
        self.assertEqual(document["Options"], [])
        self.assertEqual(document["MetaData"]["PackageID"], "com.me.utils")
        self.assertEqual(summary, {
            "package_id": "com.me.utils",
            "display_name": "Utils",
            "version": "1.0.0",
            "package_type": "asset",
            "ide_version": "2023.8.2.152",
        })

    def test_root_resource_alone_has_no_folders(self):
        """Selecting only a root-level resource leaves every folder unselected."""
        with self.assertRaises(MissingSelectionError):
            prepare_export(self.project, FIELDS, "rm_boot")

    def test_empty_match_fails(self):
        with self.assertRaises(MissingSelectionError):
            prepare_export(self.project, FIELDS, "folders/NoSuchFolder")

    def test_dry_run_writes_nothing(self):
        selection = prepare_export(self.project, FIELDS, "*")
        report = export_package(selection, self.output, dry_run=True)
        self.assertTrue(report["dry_run"])
        self.assertFalse(self.output.exists())

    def test_missing_payload_is_reported_not_raised(self):
        selection = prepare_export(self.project, FIELDS, "Scripts")
        for f in (self.project / "scripts" / "scr_util").iterdir():
            f.unlink()
        (self.project / "scripts" / "scr_util").rmdir()
        
        report = export_package(selection, self.output, show_progress=False)
        
        self.assertEqual([r["name"] for r in report["failed_copies"]], ["scr_util"])
        self.assertEqual(report["copied_resources_count"], 1)
        self.assertTrue(self.output.exists())

if __name__ == "__main__":
    unittest.main()
