import os
import re
from dataclasses import dataclass, field
from .cli_logger import logger
from .errors import MalformedPropertiesError

PROPERTIES_FILE = "project.properties"

# Numbered keys recognized in project.properties, mapped to the family they feed.
PROPERTY_PATTERNS = (
    (re.compile(r"^\s*android\.library\.reference\.\d+=(.*)$"), "libs"),
    (re.compile(r"^\s*cordova\.gradle\.include\.\d+=(.*)$"), "gradle_includes"),
    (re.compile(r"^\s*cordova\.system\.library\.\d+=(.*)$"), "system_libs"),
)


@dataclass(frozen=True)
class ProjectProperties:
    libs: frozenset = field(default_factory=frozenset)
    gradle_includes: frozenset = field(default_factory=frozenset)
    system_libs: frozenset = field(default_factory=frozenset)

    def to_dict(self):
        return {
            "libs": sorted(self.libs),
            "gradle_includes": sorted(self.gradle_includes),
            "system_libs": sorted(self.system_libs),
        }


def parse_project_properties(text):
    """Collect the unique values of each numbered key family in ``text``."""
    found = {family: set() for _, family in PROPERTY_PATTERNS}
    for line in text.splitlines():
        for pattern, family in PROPERTY_PATTERNS:
            match = pattern.match(line)
            if match:
                found[family].add(match.group(1).strip())
                break
    return ProjectProperties(**{family: frozenset(values) for family, values in found.items()})


def read_project_properties(path):
    """
    Reads a project.properties file.

    A missing file is treated as a project without references and yields empty
    sets. A file that exists but cannot be read or decoded raises
    MalformedPropertiesError.
    """
    if os.path.isdir(path):
        path = os.path.join(path, PROPERTIES_FILE)
    if not os.path.exists(path):
        logger.verbose(f"No {os.path.basename(path)} found at {path}; assuming no references.")
        return ProjectProperties()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedPropertiesError(path, e)
    return parse_project_properties(data)
