import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.realpath(__file__)), ".."))
import config
from fs import create_request
from proto_lib import ufs_pb2
from ufs_options import CreateUfsFileOptions


def test_create_request():
    request = create_request("/data/a.txt", CreateUfsFileOptions("alice", None, "0644"))
    assert request.path == "/data/a.txt"
    assert request.options.user == "alice"
    assert request.options.posix_perm == "0644"
    assert not request.options.HasField("group")


def test_create_request_with_defaults(monkeypatch):
    monkeypatch.setattr(
        config,
        "global_config",
        config.load_config(overrides=["security.authentication.type=NOSASL"]),
    )
    request = create_request("/data/b.txt")
    assert request.options.HasField("user")
    assert request.options.HasField("group")
    assert request.options.user == ""
    assert request.options.posix_perm == "0777"


def test_load_config():
    conf = config.load_config()
    assert conf.security.authentication.type == "SIMPLE"
    assert conf.security.login.username is None
    assert conf.security.authorization.permission.default_mode == "0777"


def test_generated_messages():
    fields = {
        f.name: f.number for f in ufs_pb2.CreateUfsFileOptions.DESCRIPTOR.fields
    }
    assert fields == {"user": 1, "group": 2, "posix_perm": 3}
    assert ufs_pb2.DESCRIPTOR.name == "ufs.proto"
    options_field = ufs_pb2.CreateUfsFileRequest.DESCRIPTOR.fields_by_name["options"]
    assert options_field.message_type is ufs_pb2.CreateUfsFileOptions.DESCRIPTOR
