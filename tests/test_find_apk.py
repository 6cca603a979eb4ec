import os
import shutil
import tempfile
import unittest
from antdroid.builder import AntBuilder, BuildMode, find_output_apks, locate_apk, output_dir
from helpers import write_file

class TestLocateApk(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def _touch(self, *names, directory=None):
        directory = directory or self.test_dir
        for name in names:
            write_file(os.path.join(directory, name))

    def test_locate_debug(self):
        self._touch("app-debug.apk", "app-release.apk")
        self.assertEqual(locate_apk(self.test_dir, "debug"), os.path.join(self.test_dir, "app-debug.apk"))
        self.assertEqual(locate_apk(self.test_dir, "release"), os.path.join(self.test_dir, "app-release.apk"))

    def test_empty_directory(self):
        self.assertIsNone(locate_apk(self.test_dir, "debug"))

    def test_missing_directory(self):
        self.assertEqual(find_output_apks(os.path.join(self.test_dir, "nope"), "debug"), [])

    def test_unaligned_and_unsigned_are_skipped(self):
        self._touch("app-debug-unaligned.apk", "app-debug-unsigned.apk", "app-release-unaligned.apk", "app-debug.txt")
        self.assertEqual(find_output_apks(self.test_dir, "debug"), [])
        self.assertEqual(find_output_apks(self.test_dir, "release"), [])

    def test_unknown_build_type_matches_nothing(self):
        self._touch("app-debug.apk", "app-release.apk")
        self.assertEqual(find_output_apks(self.test_dir, "profile"), [])

    def test_unsigned_release_is_found(self):
        self._touch("MainActivity-release-unsigned.apk")
        self.assertEqual(locate_apk(self.test_dir, "release"),
                         os.path.join(self.test_dir, "MainActivity-release-unsigned.apk"))

    def test_first_lexical_match(self):
        self._touch("zeta-debug.apk", "alpha-debug.apk")
        self.assertEqual(find_output_apks(self.test_dir, "debug"), [
            os.path.join(self.test_dir, "alpha-debug.apk"),
            os.path.join(self.test_dir, "zeta-debug.apk"),
        ])

    def test_scan_is_not_recursive(self):
        self._touch("app-debug.apk", directory=os.path.join(self.test_dir, "nested"))
        self.assertIsNone(locate_apk(self.test_dir, "debug"))

    def test_output_dir_follows_custom_rules(self):
        root = self.test_dir
        builder = AntBuilder(root)
        self._touch("bin-debug.apk", directory=os.path.join(root, "bin"))
        self._touch("ant-debug.apk", directory=os.path.join(root, "ant-build"))

        self.assertEqual(output_dir(root, BuildMode.CLEAN), os.path.join(root, "bin"))
        self.assertEqual(builder.locate_apk("debug"), os.path.join(root, "bin", "bin-debug.apk"))

        write_file(os.path.join(root, "custom_rules.xml"), "<project />")
        self.assertEqual(builder.locate_apk("debug"), os.path.join(root, "ant-build", "ant-debug.apk"))

        os.remove(os.path.join(root, "custom_rules.xml"))
        self.assertEqual(builder.find_output_apks("debug"), [os.path.join(root, "bin", "bin-debug.apk")])

if __name__ == '__main__':
    unittest.main()
