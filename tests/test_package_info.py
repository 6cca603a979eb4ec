import unittest
from antdroid.package_info import PackageInfo

class TestPackageInfo(unittest.TestCase):

    def test_to_properties_full(self):
        info = PackageInfo("release.keystore", "app", "storepass", "keypass", "jks")
        self.assertEqual(
            info.to_properties(),
            "key.store=release.keystore\n"
            "key.alias=app\n"
            "key.store.password=storepass\n"
            "key.alias.password=keypass\n"
            "key.store.type=jks\n",
        )

    def test_to_properties_omits_missing_optional_values(self):
        info = PackageInfo("release.keystore", "app")
        self.assertEqual(info.to_properties(), "key.store=release.keystore\nkey.alias=app\n")

    def test_to_properties_escapes_backslashes(self):
        info = PackageInfo("C:\\keys\\release.keystore", "app")
        self.assertIn("key.store=C:\\\\keys\\\\release.keystore\n", info.to_properties())

    def test_from_options_without_keystore(self):
        self.assertIsNone(PackageInfo.from_options(alias="app"))

    def test_from_options_requires_alias(self):
        with self.assertRaises(ValueError):
            PackageInfo.from_options(keystore="release.keystore")

    def test_from_options(self):
        info = PackageInfo.from_options(keystore="k", alias="a", store_password="s")
        self.assertEqual(info, PackageInfo("k", "a", "s"))

if __name__ == '__main__':
    unittest.main()
