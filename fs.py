"""
We mimic the POSIX file creation API for files in the underlying file system (UFS). Ownership and permission of a new file travel with the request as CreateUfsFileOptions; transport of the request is left to the caller.
"""
from proto_lib import ufs_pb2
from ufs_options import CreateUfsFileOptions


def create_request(
    path: str, options: CreateUfsFileOptions | None = None
) -> ufs_pb2.CreateUfsFileRequest:
    """
    build the request to create the file at path.
    options: If None, then owner and permission default to the login identity.
    """
    if options is None:
        options = CreateUfsFileOptions.defaults()
    return ufs_pb2.CreateUfsFileRequest(path=path, options=options.to_proto())
