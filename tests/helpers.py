import os

BUILD_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project name="PROJECT_NAME" default="help">
    <property file="local.properties" />
    <property file="ant.properties" />
    <import file="${sdk.dir}/tools/ant/build.xml" />
</project>
"""

MANIFEST = """<?xml version="1.0" encoding="utf-8"?>
<manifest xmlns:android="http://schemas.android.com/apk/res/android" package="io.example.hello">
    <application android:label="Hello">
        <activity android:name="SettingsActivity" />
        <activity android:name="MainActivity">
            <intent-filter>
                <action android:name="android.intent.action.MAIN" />
                <category android:name="android.intent.category.LAUNCHER" />
            </intent-filter>
        </activity>
    </application>
</manifest>
"""


def write_file(path, content=""):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        f.write(content)
    return path


def read_file(path):
    with open(path, "r") as f:
        return f.read()


def make_sdk(base_dir, template=BUILD_TEMPLATE):
    sdk_dir = os.path.join(base_dir, "sdk")
    write_file(os.path.join(sdk_dir, "tools", "lib", "build.template"), template)
    return sdk_dir


def make_project(base_dir, properties="", manifest=MANIFEST):
    root = os.path.join(base_dir, "project")
    write_file(os.path.join(root, "AndroidManifest.xml"), manifest)
    if properties is not None:
        write_file(os.path.join(root, "project.properties"), properties)
    return root
