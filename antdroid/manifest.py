import os
import xml.etree.ElementTree as ET
from .errors import InvalidManifestError

MANIFEST_FILE = "AndroidManifest.xml"
ANDROID_NS = "{http://schemas.android.com/apk/res/android}"
MAIN_ACTION = "android.intent.action.MAIN"


def _is_main_activity(activity):
    for action in activity.iter("action"):
        if action.get(ANDROID_NS + "name") == MAIN_ACTION:
            return True
    return False


def extract_project_name(project_path):
    """Return the class name of the launcher activity declared in the manifest."""
    manifest_path = os.path.join(project_path, MANIFEST_FILE)
    if not os.path.exists(manifest_path):
        raise InvalidManifestError(f"No {MANIFEST_FILE} found at {manifest_path}")
    try:
        root = ET.parse(manifest_path).getroot()
    except ET.ParseError as e:
        raise InvalidManifestError(f"Could not parse {manifest_path}: {e}")

    activities = list(root.iter("activity"))
    if not activities:
        raise InvalidManifestError(f"Could not find main activity in {manifest_path}")
    activity = next((a for a in activities if _is_main_activity(a)), activities[0])

    name = activity.get(ANDROID_NS + "name")
    if not name:
        raise InvalidManifestError(f"Main activity in {manifest_path} has no android:name")
    return name.rsplit(".", 1)[-1]
