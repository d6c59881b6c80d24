from identity import IdentityProvider, IdentityResolutionError, LoginIdentityProvider
from proto_lib import ufs_pb2


class CreateUfsFileOptions:
    """
    Options for creating a UFS file.
    Equality ignores the fields: any two instances compare equal and share one hash.
    Not thread safe: an instance belongs to a single create request.
    """

    def __init__(self, user: str | None, group: str | None, posix_perm: str | None):
        # owner of the file in the UFS
        self.__user = user
        self.__group = group
        # permission in POSIX string format, such as 0777
        self.__posix_perm = posix_perm

    @classmethod
    def defaults(
        cls, identity_provider: IdentityProvider | None = None
    ) -> "CreateUfsFileOptions":
        """
        Build options owned by the login user and group with the default permission.
        Raises IdentityResolutionError if the login identity cannot be resolved.
        """
        if identity_provider is None:
            identity_provider = LoginIdentityProvider.from_config()
        status = identity_provider.default_permission_status()
        try:
            identity_provider.set_user_from_login_module(status)
        except OSError as e:
            raise IdentityResolutionError(
                "failed to resolve the login user for UFS file options"
            ) from e
        return cls(status.user_name, status.group_name, str(status.permission))

    @property
    def user(self) -> str | None:
        return self.__user

    @property
    def group(self) -> str | None:
        return self.__group

    @property
    def posix_perm(self) -> str | None:
        return self.__posix_perm

    @posix_perm.setter
    def posix_perm(self, posix_perm: str | None) -> None:
        self.__posix_perm = posix_perm

    def has_user(self) -> bool:
        return self.__user is not None

    def has_group(self) -> bool:
        return self.__group is not None

    def has_posix_perm(self) -> bool:
        return self.__posix_perm is not None

    def to_proto(self) -> ufs_pb2.CreateUfsFileOptions:
        options = ufs_pb2.CreateUfsFileOptions()
        if self.has_user():
            options.user = self.__user
        if self.has_group():
            options.group = self.__group
        if self.has_posix_perm():
            options.posix_perm = self.__posix_perm
        return options

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreateUfsFileOptions):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return (
            f"CreateUfsFileOptions(user={self.__user!r}, group={self.__group!r}, "
            f"posix_perm={self.__posix_perm!r})"
        )
