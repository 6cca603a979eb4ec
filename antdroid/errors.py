"""Exceptions raised while preparing and running an Ant build."""


class AntdroidError(Exception):
    """Base class for every failure antdroid reports to the user."""

    def __init__(self, message, code="antdroid_error"):
        super().__init__(message)
        self.code = code


class MissingToolchainError(AntdroidError):
    """Raised when ant or the Android SDK build template is unavailable."""

    def __init__(self, message, code="missing_toolchain"):
        super().__init__(message, code=code)


class UnsupportedDependencyError(AntdroidError):
    """Raised when the project needs something Ant cannot express."""

    def __init__(self, libraries, code="unsupported_dependency"):
        super().__init__(
            "Project contains at least one plugin that requires a system library "
            f"({', '.join(sorted(libraries))}). This is not supported with ANT. "
            "Please build using gradle.",
            code=code,
        )
        self.libraries = frozenset(libraries)


class MalformedPropertiesError(AntdroidError):
    """Raised when project.properties exists but cannot be read."""

    def __init__(self, path, reason, code="malformed_properties"):
        super().__init__(f"Could not read {path}: {reason}", code=code)
        self.path = path


class InvalidManifestError(AntdroidError):
    """Raised when the main activity cannot be found in AndroidManifest.xml."""

    def __init__(self, message, code="invalid_manifest"):
        super().__init__(message, code=code)


class ExternalToolFailure(AntdroidError):
    """Raised when ant exits with a non-zero status."""

    def __init__(self, command, exit_code, code="external_tool_failure"):
        super().__init__(
            f"Command '{' '.join(command)}' failed with exit code {exit_code}",
            code=code,
        )
        self.command = list(command)
        self.exit_code = exit_code
