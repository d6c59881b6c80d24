from dataclasses import dataclass, field
from enum import Enum


# authentication types understood by the login module
class AuthType(Enum):
    NOSASL = "NOSASL"
    SIMPLE = "SIMPLE"
    CUSTOM = "CUSTOM"


@dataclass(frozen=True)
class Mode:
    bits: int = 0o777

    @classmethod
    def from_string(cls, posix_perm: str) -> "Mode":
        return cls(int(posix_perm, 8) & 0o7777)

    def apply_umask(self, umask: "Mode") -> "Mode":
        return Mode(self.bits & ~umask.bits)

    def __str__(self) -> str:
        return f"{self.bits:04o}"


@dataclass
class PermissionStatus:
    user_name: str = ""
    group_name: str = ""
    permission: Mode = field(default_factory=Mode)

    @classmethod
    def defaults(cls) -> "PermissionStatus":
        # empty owner, full permission
        return cls()
