import enum
import os
import shutil
from dataclasses import dataclass
from typing import Optional

from . import check_reqs
from .cli_logger import logger
from .errors import MissingToolchainError, UnsupportedDependencyError
from .manifest import extract_project_name
from .package_info import PackageInfo
from .properties import PROPERTIES_FILE, read_project_properties
from .utils import spawn, write_generated, write_if_absent, remove_if_generated

BUILD_TYPES = ("debug", "release")

BUILD_XML = "build.xml"
LOCAL_PROPERTIES = "local.properties"
CUSTOM_RULES = "custom_rules.xml"
SIGNING_PROPERTIES = "-signing.properties"
PROJECT_NAME_PLACEHOLDER = "PROJECT_NAME"

DEFAULT_OUT_DIR = "bin"
INCREMENTAL_OUT_DIR = "ant-build"
INCREMENTAL_GEN_DIR = "ant-gen"
LEGACY_OUT_DIR = "out"


class BuildMode(enum.Enum):
    # custom_rules.xml lets ant build incrementally into ant-build/.
    INCREMENTAL = "incremental"
    CLEAN = "clean"


def detect_build_mode(root):
    if os.path.exists(os.path.join(root, CUSTOM_RULES)):
        return BuildMode.INCREMENTAL
    return BuildMode.CLEAN


def output_dir(root, mode):
    if mode is BuildMode.INCREMENTAL:
        return os.path.join(root, INCREMENTAL_OUT_DIR)
    return os.path.join(root, DEFAULT_OUT_DIR)


def signing_properties_path(root, build_type):
    return os.path.join(root, build_type + SIGNING_PROPERTIES)


@dataclass(frozen=True)
class BuildOptions:
    build_type: str = "debug"
    package_info: Optional[PackageInfo] = None

    def __post_init__(self):
        if self.build_type not in BUILD_TYPES:
            raise ValueError(f"Unsupported build type '{self.build_type}'. Expected one of {', '.join(BUILD_TYPES)}.")


# -------------------- Artifact lookup --------------------

def _matches_build_type(apk_name, build_type):
    if build_type == "debug":
        return "-debug" in apk_name and "-unaligned" not in apk_name and "-unsigned" not in apk_name
    if build_type == "release":
        return "-release" in apk_name and "-unaligned" not in apk_name
    return False


def find_output_apks(directory, build_type):
    """Return the .apk files directly inside ``directory`` for ``build_type``, sorted by name."""
    if not os.path.isdir(directory):
        return []
    return [
        os.path.join(directory, name)
        for name in sorted(os.listdir(directory))
        if name.endswith(".apk")
        and os.path.isfile(os.path.join(directory, name))
        and _matches_build_type(name, build_type)
    ]


def locate_apk(directory, build_type):
    """Return the first matching apk in ``directory`` or None."""
    apks = find_output_apks(directory, build_type)
    return apks[0] if apks else None


# -------------------- Ant builder --------------------

class AntBuilder:
    """Prepares an Ant based Android project and drives ant against it."""

    def __init__(self, root, sdk_dir=None, ant="ant"):
        self.root = os.path.abspath(root)
        self.sdk_dir = sdk_dir
        self.ant = ant

    def get_args(self, target, options, mode):
        args = [target, "-f", os.path.join(self.root, BUILD_XML)]
        # custom_rules.xml is required for incremental builds.
        if mode is BuildMode.INCREMENTAL:
            args.extend([f"-Dout.dir={INCREMENTAL_OUT_DIR}", f"-Dgen.absolute.dir={INCREMENTAL_GEN_DIR}"])
        if options.package_info:
            args.append("-propertyfile=" + signing_properties_path(self.root, options.build_type))
        return args

    def _read_build_template(self):
        template_path = check_reqs.get_build_template(self.sdk_dir)
        try:
            with open(template_path, "r", encoding="utf-8") as f:
                return f.read()
        except OSError as e:
            raise MissingToolchainError(f"Could not read Ant build template {template_path}: {e}")

    def _write_build_files(self, project_path, build_xml):
        with open(os.path.join(project_path, BUILD_XML), "w", encoding="utf-8") as f:
            f.write(build_xml)
        if write_if_absent(os.path.join(project_path, LOCAL_PROPERTIES)):
            logger.verbose(f"Created placeholder {LOCAL_PROPERTIES} in {project_path}")

    def prepare_env(self, options):
        """
        Regenerates build.xml for the project and its library sub-projects and
        brings the signing properties file in line with ``options``.

        build.xml is copied from the SDK on every build so the project always
        uses the SDK's latest template.
        """
        check_reqs.check_ant()

        template = self._read_build_template()
        project_name = extract_project_name(self.root)
        build_xml = template.replace(PROJECT_NAME_PLACEHOLDER, project_name, 1)
        logger.verbose(f"Writing {BUILD_XML} for project '{project_name}'")

        self._write_build_files(self.root, build_xml)
        properties = read_project_properties(os.path.join(self.root, PROPERTIES_FILE))
        for sub_project in sorted(properties.libs):
            if not sub_project:
                continue
            sub_project_path = os.path.join(self.root, sub_project)
            if not os.path.isdir(sub_project_path):
                logger.warning(f"Library project '{sub_project}' referenced in {PROPERTIES_FILE} does not exist. Skipping.")
                continue
            self._write_build_files(sub_project_path, build_xml)

        if properties.system_libs:
            raise UnsupportedDependencyError(properties.system_libs)

        properties_path = signing_properties_path(self.root, options.build_type)
        if options.package_info:
            write_generated(properties_path, options.package_info.to_properties())
        elif remove_if_generated(properties_path):
            logger.info(f"Removed stale signing properties {properties_path}")

    def build(self, options):
        """Builds the project with ant. Returns the exit code (always 0)."""
        mode = detect_build_mode(self.root)
        # Without custom_rules.xml, we need to clean before building.
        # The signing properties written by prepare_env are still needed.
        if mode is BuildMode.CLEAN:
            self._clean_outputs(options, mode)

        return self._run_ant(options.build_type, options, mode)

    def _run_ant(self, target, options, mode):
        args = self.get_args(target, options, mode)
        check_reqs.check_ant()
        logger.verbose(f"Executing: {self.ant} {' '.join(args)}")
        return spawn([self.ant] + args, cwd=self.root)

    def _clean_outputs(self, options, mode):
        self._run_ant("clean", options, mode)
        for directory in (output_dir(self.root, mode), os.path.join(self.root, LEGACY_OUT_DIR)):
            if os.path.isdir(directory):
                shutil.rmtree(directory)
                logger.verbose(f"Removed directory {directory}")

    def clean(self, options):
        """Runs `ant clean`, then removes build output and generated signing files."""
        self._clean_outputs(options, detect_build_mode(self.root))
        for build_type in BUILD_TYPES:
            remove_if_generated(signing_properties_path(self.root, build_type))

    def find_output_apks(self, build_type):
        return find_output_apks(output_dir(self.root, detect_build_mode(self.root)), build_type)

    def locate_apk(self, build_type):
        return locate_apk(output_dir(self.root, detect_build_mode(self.root)), build_type)
