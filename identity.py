"""
Resolve who the client is logged in as, for use as the owner of files created in the UFS.
"""
import getpass
import grp
import logging
import pwd
from typing import Protocol

from omegaconf import DictConfig

from config import get_client_config
from interface_type import AuthType, Mode, PermissionStatus

logger = logging.getLogger(__name__)


class IdentityResolutionError(RuntimeError):
    pass


class IdentityProvider(Protocol):
    def default_permission_status(self) -> PermissionStatus:
        """
        Return a status with an empty owner and the default permission.
        """
        ...

    def set_user_from_login_module(self, status: PermissionStatus) -> None:
        """
        Fill in user and group of status from the login context.
        Raises OSError when the login identity cannot be read.
        """
        ...


class LoginIdentityProvider:
    def __init__(self, conf: DictConfig):
        self.__conf = conf
        self.__login: tuple[str, str] | None = None

    @classmethod
    def from_config(cls) -> "LoginIdentityProvider":
        return cls(get_client_config())

    @property
    def auth_type(self) -> AuthType:
        return AuthType(self.__conf.security.authentication.type)

    def default_permission_status(self) -> PermissionStatus:
        permission_conf = self.__conf.security.authorization.permission
        mode = Mode.from_string(permission_conf.default_mode)
        if permission_conf.apply_umask:
            mode = mode.apply_umask(Mode.from_string(permission_conf.umask))
        return PermissionStatus(permission=mode)

    def set_user_from_login_module(self, status: PermissionStatus) -> None:
        # without authentication the owner stays empty
        if self.auth_type == AuthType.NOSASL:
            return
        status.user_name, status.group_name = self.__login_identity()

    def __login_identity(self) -> tuple[str, str]:
        if self.__login is None:
            user_name = self.__conf.security.login.username or os_login_name()
            self.__login = (user_name, primary_group_name(user_name))
            logger.debug("login user %s, group %s", *self.__login)
        return self.__login


def os_login_name() -> str:
    try:
        return getpass.getuser()
    except KeyError as e:
        raise OSError("cannot determine the OS login name") from e


def primary_group_name(user_name: str) -> str:
    try:
        gid = pwd.getpwnam(user_name).pw_gid
        return grp.getgrgid(gid).gr_name
    except KeyError as e:
        raise OSError(f"no primary group for user {user_name}") from e
