from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PackageInfo:
    """Signing credentials handed to ant through a -propertyfile."""

    keystore: str
    alias: str
    store_password: Optional[str] = None
    password: Optional[str] = None
    keystore_type: Optional[str] = None

    def _entries(self):
        yield "key.store", self.keystore
        yield "key.alias", self.alias
        if self.store_password:
            yield "key.store.password", self.store_password
        if self.password:
            yield "key.alias.password", self.password
        if self.keystore_type:
            yield "key.store.type", self.keystore_type

    def to_properties(self):
        result = ""
        for name, value in self._entries():
            # Java properties treat backslash as an escape character.
            escaped = str(value).replace("\\", "\\\\")
            result += f"{name}={escaped}\n"
        return result

    @classmethod
    def from_options(cls, keystore=None, alias=None, store_password=None, password=None, keystore_type=None):
        """Build a PackageInfo when a keystore was supplied, otherwise return None."""
        if not keystore:
            return None
        if not alias:
            raise ValueError("A key alias is required when a keystore is given.")
        return cls(keystore, alias, store_password, password, keystore_type)
