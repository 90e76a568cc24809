import unittest
from gm_package_exporter.errors import OrphanResourceError, TreeConflictError, MalformedPathError
from gm_package_exporter.project.models import FolderDescriptor, ResourceIdentity, ResourceRecord, ResourceTerminal
from gm_package_exporter.project.projector import flatten_resources
from gm_package_exporter.project.tree import build_tree

def folders(*paths):
    return [FolderDescriptor(p) for p in paths]

def resource(name, path, parent):
    return ResourceRecord(ResourceIdentity(name, path), parent)

class TestTreeBuilder(unittest.TestCase):
    def test_builds_nested_folders_and_resources(self):
        tree = build_tree(
            folders("folders/Scripts.yy", "folders/Scripts/Sub.yy"),
            [resource("foo", "scripts/foo/foo.yy", "folders/Scripts/Sub.yy")]
        )
        self.assertEqual(
            tree,
            {"Scripts": {"Sub": {"foo": ResourceTerminal(ResourceIdentity("foo", "scripts/foo/foo.yy"))}}}
        )

    def test_folder_order_does_not_matter(self):
        a = build_tree(folders("folders/A/B/C.yy", "folders/A.yy", "folders/A/B.yy"), [])
        b = build_tree(folders("folders/A.yy", "folders/A/B.yy", "folders/A/B/C.yy"), [])
        self.assertEqual(a, b)
        self.assertEqual(a, {"A": {"B": {"C": {}}}})

    def test_redeclared_folder_is_idempotent(self):
        tree = build_tree(
            folders("folders/A.yy", "folders/A.yy"),
            [resource("obj", "objects/obj/obj.yy", "folders/A.yy")]
        )
        self.assertEqual(list(tree["A"].keys()), ["obj"])

    def test_orphan_resource(self):
        with self.assertRaises(OrphanResourceError):
            build_tree(folders("folders/A.yy"), [resource("x", "scripts/x/x.yy", "folders/Missing.yy")])

    def test_parent_chain_through_resource_is_orphan(self):
        with self.assertRaises(OrphanResourceError):
            build_tree(
                folders("folders/A.yy"),
                [
                    resource("x", "scripts/x/x.yy", "folders/A.yy"),
                    resource("y", "scripts/y/y.yy", "folders/A/x.yy"),
                ]
            )

    def test_resource_shadowing_folder_conflicts(self):
        with self.assertRaises(TreeConflictError):
            build_tree(folders("folders/A.yy", "folders/A/B.yy"), [resource("B", "scripts/B/B.yy", "folders/A.yy")])

    def test_last_write_wins(self):
        a = resource("spr", "sprites/a/spr.yy", "folders/A.yy")
        b = resource("spr", "sprites/b/spr.yy", "folders/A.yy")
        tree = build_tree(folders("folders/A.yy"), [a, b])
        self.assertEqual(tree["A"]["spr"].id, b.id)
        self.assertEqual(flatten_resources(tree), [b.id])

    def test_root_parented_resource(self):
        tree = build_tree([], [resource("rm_init", "rooms/rm_init/rm_init.yy", None)])
        self.assertEqual(tree["rm_init"].id.name, "rm_init")

    def test_malformed_folder_path(self):
        with self.assertRaises(MalformedPathError):
            build_tree(folders("Scripts.yy"), [])

    def test_flatten_returns_every_declared_resource(self):
        records = [
            resource("a", "scripts/a/a.yy", "folders/S.yy"),
            resource("b", "scripts/b/b.yy", "folders/S/T.yy"),
            resource("c", "rooms/c/c.yy", None),
        ]
        tree = build_tree(folders("folders/S.yy", "folders/S/T.yy"), records)
        self.assertCountEqual(flatten_resources(tree), [r.id for r in records])

if __name__ == '__main__':
    unittest.main()
